"""
Engagement read model.

Stored videos and comments are enriched per request with their owner's public
profile, like/comment counts and the viewer's own flags. Every lookup is one
batched query keyed by ids; the results are joined in memory by the pure
`shape_*` functions below, which never touch the database.
"""
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.model.comment import CommentModel
from vidtube.model.like import LikeModel, LikeTarget
from vidtube.model.subscription import SubscriptionModel
from vidtube.model.user import UserModel
from vidtube.model.video import VideoModel


def _unique(ids) -> list[int]:
    return list({i for i in ids if i is not None})


async def load_users(db: AsyncSession, user_ids) -> dict[int, UserModel]:
    ids = _unique(user_ids)
    if not ids:
        return {}
    result = await db.execute(select(UserModel).where(UserModel.id.in_(ids)))
    return {user.id: user for user in result.scalars().all()}


async def load_videos(db: AsyncSession, video_ids) -> dict[int, VideoModel]:
    ids = _unique(video_ids)
    if not ids:
        return {}
    result = await db.execute(select(VideoModel).where(VideoModel.id.in_(ids)))
    return {video.id: video for video in result.scalars().all()}


async def _grouped_count(db: AsyncSession, key_column, ids, *conditions) -> dict[int, int]:
    ids = _unique(ids)
    if not ids:
        return {}
    result = await db.execute(
        select(key_column, func.count())
        .where(key_column.in_(ids), *conditions)
        .group_by(key_column)
    )
    return {key: count for key, count in result.all()}


async def count_likes(db: AsyncSession, kind: LikeTarget, target_ids) -> dict[int, int]:
    return await _grouped_count(db, LikeModel.target_id, target_ids, LikeModel.target_kind == kind)


async def count_comments(db: AsyncSession, video_ids) -> dict[int, int]:
    return await _grouped_count(db, CommentModel.video_id, video_ids)


async def count_subscribers(db: AsyncSession, channel_ids) -> dict[int, int]:
    return await _grouped_count(db, SubscriptionModel.channel_id, channel_ids)


async def load_viewer_likes(db: AsyncSession, viewer_id: int | None, kind: LikeTarget, target_ids) -> set[int]:
    ids = _unique(target_ids)
    if viewer_id is None or not ids:
        return set()
    result = await db.execute(
        select(LikeModel.target_id).where(
            LikeModel.liked_by == viewer_id,
            LikeModel.target_kind == kind,
            LikeModel.target_id.in_(ids),
        )
    )
    return set(result.scalars().all())


async def load_viewer_subscriptions(db: AsyncSession, viewer_id: int | None, channel_ids) -> set[int]:
    ids = _unique(channel_ids)
    if viewer_id is None or not ids:
        return set()
    result = await db.execute(
        select(SubscriptionModel.channel_id).where(
            SubscriptionModel.subscriber_id == viewer_id,
            SubscriptionModel.channel_id.in_(ids),
        )
    )
    return set(result.scalars().all())


def shape_user(user: UserModel | None) -> dict | None:
    """Public representation of a stored user; the password hash never leaves here."""
    if user is None:
        return None
    return {
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "fullName": user.full_name,
        "avatarUrl": user.avatar_url or "",
        "coverUrl": user.cover_url or "",
        "bio": user.bio or "",
        "createdAt": user.created_at,
        "updatedAt": user.updated_at,
    }


def shape_owner(user: UserModel | None, subscribers_count: int | None = None) -> dict | None:
    if user is None:
        return None
    owner = {
        "id": user.id,
        "username": user.username,
        "fullName": user.full_name,
        "avatarUrl": user.avatar_url or "",
    }
    if subscribers_count is not None:
        owner["subscribersCount"] = int(subscribers_count)
    return owner


def shape_video(
        video: VideoModel,
        owner: dict | None,
        likes_count: int = 0,
        comments_count: int = 0,
        is_liked: bool = False,
        is_subscribed: bool = False,
) -> dict:
    return {
        "id": video.id,
        "title": video.title,
        "description": video.description or "",
        "url": video.url,
        "thumbnailUrl": video.thumbnail_url or "",
        "videoformat": video.videoformat,
        "duration": float(video.duration or 0),
        "views": int(video.views or 0),
        "isPublished": bool(video.is_published),
        "privacy": video.privacy.value if video.privacy is not None else None,
        "category": video.category,
        "tags": list(video.tags or []),
        "createdAt": video.created_at,
        "updatedAt": video.updated_at,
        "owner": owner,
        "likesCount": int(likes_count or 0),
        "commentsCount": int(comments_count or 0),
        "isLiked": bool(is_liked),
        "isSubscribed": bool(is_subscribed),
    }


def shape_comment(
        comment: CommentModel,
        owner: dict | None,
        likes_count: int = 0,
        is_liked: bool = False,
) -> dict:
    return {
        "id": comment.id,
        "content": comment.content,
        "videoId": comment.video_id,
        "parentId": comment.parent_id,
        "createdAt": comment.created_at,
        "updatedAt": comment.updated_at,
        "owner": owner,
        "likesCount": int(likes_count or 0),
        "isLiked": bool(is_liked),
    }


async def compose_videos(
        db: AsyncSession,
        videos: list[VideoModel],
        viewer_id: int | None = None,
        with_subscribers: bool = False,
) -> list[dict]:
    """Enrich videos in their given order; one query per lookup regardless of list size."""
    if not videos:
        return []

    video_ids = [video.id for video in videos]
    owner_ids = [video.owner_id for video in videos]

    owners = await load_users(db, owner_ids)
    likes = await count_likes(db, LikeTarget.VIDEO, video_ids)
    comments = await count_comments(db, video_ids)
    liked = await load_viewer_likes(db, viewer_id, LikeTarget.VIDEO, video_ids)
    subscribed = await load_viewer_subscriptions(db, viewer_id, owner_ids)
    subscribers = await count_subscribers(db, owner_ids) if with_subscribers else {}

    return [
        shape_video(
            video,
            shape_owner(
                owners.get(video.owner_id),
                subscribers.get(video.owner_id, 0) if with_subscribers else None,
            ),
            likes_count=likes.get(video.id, 0),
            comments_count=comments.get(video.id, 0),
            is_liked=video.id in liked,
            is_subscribed=video.owner_id in subscribed,
        )
        for video in videos
    ]


async def compose_video(db: AsyncSession, video: VideoModel, viewer_id: int | None = None) -> dict:
    [composed] = await compose_videos(db, [video], viewer_id, with_subscribers=True)
    return composed


async def compose_comments(
        db: AsyncSession,
        comments: list[CommentModel],
        viewer_id: int | None = None,
        with_replies: bool = False,
) -> list[dict]:
    """
    Enrich comments in their given order.

    With `with_replies`, every comment also carries `repliesCount` and its
    `replies` (oldest first, enriched the same way but without nesting further).
    """
    if not comments:
        return []

    replies_by_parent: dict[int, list[CommentModel]] = {}
    if with_replies:
        result = await db.execute(
            select(CommentModel)
            .where(CommentModel.parent_id.in_([comment.id for comment in comments]))
            .order_by(CommentModel.created_at.asc(), CommentModel.id.asc())
        )
        for reply in result.scalars().all():
            replies_by_parent.setdefault(reply.parent_id, []).append(reply)

    everything = comments + [reply for replies in replies_by_parent.values() for reply in replies]
    comment_ids = [comment.id for comment in everything]

    owners = await load_users(db, [comment.owner_id for comment in everything])
    likes = await count_likes(db, LikeTarget.COMMENT, comment_ids)
    liked = await load_viewer_likes(db, viewer_id, LikeTarget.COMMENT, comment_ids)

    def shape(comment):
        return shape_comment(
            comment,
            shape_owner(owners.get(comment.owner_id)),
            likes_count=likes.get(comment.id, 0),
            is_liked=comment.id in liked,
        )

    composed = []
    for comment in comments:
        item = shape(comment)
        if with_replies:
            replies = replies_by_parent.get(comment.id, [])
            item["repliesCount"] = len(replies)
            item["replies"] = [shape(reply) for reply in replies]
        composed.append(item)
    return composed
