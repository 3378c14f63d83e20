from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_playlist as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import get_optional_user
from vidtube.service.playlist import get_readable_playlist, compose_playlist_detail
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


@router.get("/{playlistId}")
async def get_playlist(
        playlistId: PathId,
        viewer: UserModel | None = Depends(get_optional_user),
        db: AsyncSession = Depends(get_db)
):
    viewer_id = viewer.id if viewer else None
    playlist = await get_readable_playlist(db, playlistId, viewer_id)
    return api_response("Playlist fetched successfully", await compose_playlist_detail(db, playlist, viewer_id))
