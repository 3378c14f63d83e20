from fastapi import Depends
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_playlist as router
from vidtube.db.dependency import get_db
from vidtube.model.playlist import PlaylistModel, PlaylistVideoModel
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.ownership import get_owned
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


@router.delete("/{playlistId}")
async def delete_playlist(
        playlistId: PathId,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    await get_owned(db, PlaylistModel, playlistId, current_user.id, "Playlist")

    await db.execute(delete(PlaylistVideoModel).where(PlaylistVideoModel.playlist_id == playlistId))
    await db.execute(delete(PlaylistModel).where(PlaylistModel.id == playlistId))
    await db.commit()

    return api_response("Playlist deleted successfully", {"playlistId": playlistId})
