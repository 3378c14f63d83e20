from fastapi import Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_playlist as router
from vidtube.db.dependency import get_db
from vidtube.model.playlist import PlaylistModel, PlaylistVideoModel
from vidtube.model.user import UserModel
from vidtube.model.video import VideoModel
from vidtube.service.auth import get_current_user
from vidtube.service.ownership import get_owned
from vidtube.service.playlist import compose_playlist_detail
from vidtube.utility.errors import NotFoundError, ConflictError
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


@router.post("/{playlistId}/videos/{videoId}")
async def add_video_to_playlist(
        playlistId: PathId,
        videoId: PathId,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    playlist = await get_owned(db, PlaylistModel, playlistId, current_user.id, "Playlist")

    published = await db.scalar(
        select(VideoModel.id).where(VideoModel.id == videoId, VideoModel.is_published.is_(True))
    )
    if published is None:
        raise NotFoundError("Video")

    already_added = await db.scalar(
        select(PlaylistVideoModel.id).where(
            PlaylistVideoModel.playlist_id == playlistId,
            PlaylistVideoModel.video_id == videoId,
        )
    )
    if already_added is not None:
        raise ConflictError("Video is already in this playlist", "videoId")

    last_position = await db.scalar(
        select(func.max(PlaylistVideoModel.position)).where(PlaylistVideoModel.playlist_id == playlistId)
    )
    db.add(PlaylistVideoModel(
        playlist_id=playlistId,
        video_id=videoId,
        position=0 if last_position is None else last_position + 1,
    ))
    await db.commit()

    return api_response(
        "Video added to playlist successfully",
        await compose_playlist_detail(db, playlist, current_user.id),
    )
