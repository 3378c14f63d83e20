from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.model.video import VideoModel, VideoPrivacy
from vidtube.utility.errors import NotFoundError, ForbiddenError


def is_visible_to(video: VideoModel, viewer_id: int | None) -> bool:
    """Owners always see their videos; everyone else needs published and not private."""
    if viewer_id is not None and video.owner_id == viewer_id:
        return True
    return bool(video.is_published) and video.privacy != VideoPrivacy.PRIVATE


def listed_video_conditions() -> list:
    # unlisted videos stay reachable by id but never show up in listings
    return [VideoModel.is_published.is_(True), VideoModel.privacy == VideoPrivacy.PUBLIC]


async def get_video_or_404(db: AsyncSession, video_id: int) -> VideoModel:
    result = await db.execute(select(VideoModel).where(VideoModel.id == video_id))
    video = result.scalar_one_or_none()
    if not video:
        raise NotFoundError("Video")
    return video


async def get_visible_video(db: AsyncSession, video_id: int, viewer_id: int | None) -> VideoModel:
    video = await get_video_or_404(db, video_id)
    if not is_visible_to(video, viewer_id):
        raise ForbiddenError("This video is not available")
    return video
