from fastapi import Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_playlist as router
from vidtube.db.dependency import get_db
from vidtube.model.playlist import PlaylistModel
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.ownership import get_owned
from vidtube.service.playlist import PlaylistName, PlaylistDescription, compose_playlists
from vidtube.utility.errors import ValidationError
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


class UpdatePlaylistRequest(BaseModel):
    name: PlaylistName | None = None
    description: PlaylistDescription | None = None
    isPublic: bool | None = None


@router.patch("/{playlistId}")
async def update_playlist(
        playlistId: PathId,
        data: UpdatePlaylistRequest,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    playlist = await get_owned(db, PlaylistModel, playlistId, current_user.id, "Playlist")

    if data.name is None and data.description is None and data.isPublic is None:
        raise ValidationError("At least one field is required to update the playlist")

    if data.name is not None:
        playlist.name = data.name
    if data.description is not None:
        playlist.description = data.description
    if data.isPublic is not None:
        playlist.is_public = data.isPublic

    await db.commit()
    await db.refresh(playlist)

    [composed] = await compose_playlists(db, [playlist])
    return api_response("Playlist updated successfully", composed)
