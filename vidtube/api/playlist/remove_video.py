from fastapi import Depends
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_playlist as router
from vidtube.db.dependency import get_db
from vidtube.model.playlist import PlaylistModel, PlaylistVideoModel
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.ownership import get_owned
from vidtube.service.playlist import compose_playlist_detail, renumber_entries
from vidtube.utility.errors import NotFoundError
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


@router.delete("/{playlistId}/videos/{videoId}")
async def remove_video_from_playlist(
        playlistId: PathId,
        videoId: PathId,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    playlist = await get_owned(db, PlaylistModel, playlistId, current_user.id, "Playlist")

    entry_id = await db.scalar(
        select(PlaylistVideoModel.id).where(
            PlaylistVideoModel.playlist_id == playlistId,
            PlaylistVideoModel.video_id == videoId,
        )
    )
    if entry_id is None:
        raise NotFoundError("Video in playlist")

    await db.execute(delete(PlaylistVideoModel).where(PlaylistVideoModel.id == entry_id))
    await renumber_entries(db, playlistId)
    await db.commit()

    return api_response(
        "Video removed from playlist successfully",
        await compose_playlist_detail(db, playlist, current_user.id),
    )
