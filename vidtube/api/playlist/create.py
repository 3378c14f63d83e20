from fastapi import Depends, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_playlist as router
from vidtube.db.dependency import get_db
from vidtube.model.playlist import PlaylistModel
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.playlist import PlaylistName, PlaylistDescription, compose_playlists
from vidtube.utility.response import api_response


class CreatePlaylistRequest(BaseModel):
    name: PlaylistName
    description: PlaylistDescription = ""
    isPublic: bool = True


@router.post("")
async def create_playlist(
        data: CreatePlaylistRequest,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    playlist = PlaylistModel(
        name=data.name,
        description=data.description,
        is_public=data.isPublic,
        owner_id=current_user.id,
    )
    db.add(playlist)
    await db.commit()
    await db.refresh(playlist)

    [composed] = await compose_playlists(db, [playlist])
    return api_response("Playlist created successfully", composed, status.HTTP_201_CREATED)
