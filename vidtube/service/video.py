from dataclasses import dataclass, asdict
from sqlalchemy import select, delete, update, func, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.config.environments import STORAGE_BUCKET_VIDEOS, STORAGE_BUCKET_THUMBNAILS
from vidtube.model.comment import CommentModel
from vidtube.model.like import LikeModel, LikeTarget
from vidtube.model.playlist import PlaylistVideoModel
from vidtube.model.video import VideoModel, WatchHistoryModel
from vidtube.service.engagement import compose_videos, load_videos
from vidtube.service.visibility import get_visible_video, is_visible_to, listed_video_conditions
from vidtube.utility.logger import get_logger
from vidtube.utility.pagination import PageParams, Page, paginate_list
from vidtube.utility.storage import delete_from_storage
from vidtube.utility.time import utc_now

logger = get_logger("video")

SORT_COLUMNS = {
    "createdAt": VideoModel.created_at,
    "views": VideoModel.views,
    "title": VideoModel.title,
    "duration": VideoModel.duration,
}


def _ordering(sort_by: str, descending: bool) -> list:
    column = SORT_COLUMNS.get(sort_by, VideoModel.created_at)
    return [column.desc() if descending else column.asc(), VideoModel.id.desc()]


async def _page_of_videos(db: AsyncSession, conditions: list, params: PageParams, ordering: list, viewer_id: int | None) -> Page:
    total = await db.scalar(select(func.count()).select_from(VideoModel).where(*conditions))
    result = await db.execute(
        select(VideoModel).where(*conditions).order_by(*ordering).offset(params.skip).limit(params.limit)
    )
    videos = list(result.scalars().all())
    return Page(params, total or 0, await compose_videos(db, videos, viewer_id))


async def list_videos(
        db: AsyncSession,
        params: PageParams,
        sort_by: str,
        descending: bool,
        category: str | None = None,
        viewer_id: int | None = None,
) -> Page:
    conditions = listed_video_conditions()
    if category:
        conditions.append(VideoModel.category == category.strip().lower())
    return await _page_of_videos(db, conditions, params, _ordering(sort_by, descending), viewer_id)


async def list_user_videos(
        db: AsyncSession,
        owner_id: int,
        params: PageParams,
        sort_by: str,
        descending: bool,
        viewer_id: int | None = None,
) -> Page:
    conditions = [VideoModel.owner_id == owner_id]
    if viewer_id != owner_id:
        conditions.extend(listed_video_conditions())
    return await _page_of_videos(db, conditions, params, _ordering(sort_by, descending), viewer_id)


async def record_watch(db: AsyncSession, video_id: int, viewer_id: int) -> bool:
    """
    Add the video to the viewer's watch history.

    Returns whether a view was counted: only the first entry for a
    (viewer, video) pair counts, and owners watching their own videos never do.
    Watching again just refreshes the entry's timestamp.
    """
    video = await get_visible_video(db, video_id, viewer_id)
    is_owner = video.owner_id == viewer_id

    existing = await db.scalar(
        select(WatchHistoryModel.id).where(
            WatchHistoryModel.user_id == viewer_id,
            WatchHistoryModel.video_id == video_id,
        )
    )
    if existing is None:
        db.add(WatchHistoryModel(user_id=viewer_id, video_id=video_id))
        try:
            await db.flush()
        except IntegrityError:
            await db.rollback()
            existing = True
        else:
            if not is_owner:
                await db.execute(
                    update(VideoModel).where(VideoModel.id == video_id).values(views=VideoModel.views + 1)
                )
            await db.commit()
            return not is_owner

    await db.execute(
        update(WatchHistoryModel)
        .where(WatchHistoryModel.user_id == viewer_id, WatchHistoryModel.video_id == video_id)
        .values(watched_at=utc_now())
    )
    await db.commit()
    return False


async def watch_history(db: AsyncSession, viewer_id: int, params: PageParams) -> Page:
    result = await db.execute(
        select(WatchHistoryModel.video_id)
        .where(WatchHistoryModel.user_id == viewer_id)
        .order_by(WatchHistoryModel.watched_at.desc(), WatchHistoryModel.id.desc())
    )
    video_ids = list(result.scalars().all())
    videos = await load_videos(db, video_ids)

    # entries for deleted or hidden videos are skipped rather than shown as holes
    watched = [videos[i] for i in video_ids if i in videos and is_visible_to(videos[i], viewer_id)]

    page_videos, total = paginate_list(watched, params)
    return Page(params, total, await compose_videos(db, page_videos, viewer_id))


@dataclass
class CascadeOutcome:
    media: bool = False
    thumbnail: bool = False
    watch_history: bool = False
    likes: bool = False
    comments: bool = False
    playlists: bool = False

    def as_dict(self) -> dict:
        return asdict(self)

    @property
    def failed_steps(self) -> list[str]:
        return [step for step, ok in self.as_dict().items() if not ok]


async def _cleanup_step(db: AsyncSession, video_id: int, step: str, statement) -> bool:
    try:
        await db.execute(statement)
        await db.commit()
        return True
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("Cleanup step %s failed for video %s", step, video_id)
        return False


async def delete_video(db: AsyncSession, video: VideoModel) -> CascadeOutcome:
    """
    Remove a video and everything hanging off it.

    Every step commits on its own and a failed step is logged and skipped, so
    a partial cleanup is possible; the outcome says which steps went through.
    Only the final removal of the video row is allowed to fail the request.
    """
    video_id = video.id
    media_url = video.url
    thumbnail_url = video.thumbnail_url

    outcome = CascadeOutcome()
    outcome.media = await delete_from_storage(media_url, STORAGE_BUCKET_VIDEOS)
    # a video without thumbnail has nothing to clean up
    outcome.thumbnail = await delete_from_storage(thumbnail_url, STORAGE_BUCKET_THUMBNAILS) if thumbnail_url else True

    comment_ids = select(CommentModel.id).where(CommentModel.video_id == video_id)

    outcome.watch_history = await _cleanup_step(
        db, video_id, "watch_history",
        delete(WatchHistoryModel).where(WatchHistoryModel.video_id == video_id),
    )
    outcome.likes = await _cleanup_step(
        db, video_id, "likes",
        delete(LikeModel).where(
            or_(
                (LikeModel.target_kind == LikeTarget.VIDEO) & (LikeModel.target_id == video_id),
                (LikeModel.target_kind == LikeTarget.COMMENT) & (LikeModel.target_id.in_(comment_ids)),
            )
        ),
    )
    outcome.comments = await _cleanup_step(
        db, video_id, "comments",
        delete(CommentModel).where(CommentModel.video_id == video_id),
    )
    outcome.playlists = await _cleanup_step(
        db, video_id, "playlists",
        delete(PlaylistVideoModel).where(PlaylistVideoModel.video_id == video_id),
    )

    await db.execute(delete(VideoModel).where(VideoModel.id == video_id))
    await db.commit()

    if outcome.failed_steps:
        logger.warning("Video %s deleted with incomplete cleanup: %s", video_id, ", ".join(outcome.failed_steps))
    else:
        logger.info("Video %s deleted", video_id)
    return outcome
