from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.model.subscription import SubscriptionModel
from vidtube.model.user import UserModel
from vidtube.model.video import VideoModel
from vidtube.service.engagement import count_subscribers, load_viewer_subscriptions
from vidtube.service.visibility import listed_video_conditions
from vidtube.utility.errors import ConflictError, NotFoundError


async def ensure_identity_available(db: AsyncSession, email: str | None, username: str | None, user_id: int | None = None):
    """409 naming the field when another account already uses the email or username."""
    for field_name, column, value in (("email", UserModel.email, email), ("username", UserModel.username, username)):
        if value is None:
            continue
        query = select(UserModel.id).where(column == value)
        if user_id is not None:
            query = query.where(UserModel.id != user_id)
        if await db.scalar(query) is not None:
            raise ConflictError(f"User with this {field_name} already exists", field_name)


async def get_user_or_404(db: AsyncSession, user_id: int, resource: str = "User") -> UserModel:
    user = (await db.execute(select(UserModel).where(UserModel.id == user_id))).scalar_one_or_none()
    if not user:
        raise NotFoundError(resource)
    return user


async def subscribers_count(db: AsyncSession, channel_id: int) -> int:
    return (await count_subscribers(db, [channel_id])).get(channel_id, 0)


async def channel_profile(db: AsyncSession, username: str, viewer_id: int | None) -> dict:
    channel = (await db.execute(select(UserModel).where(UserModel.username == username))).scalar_one_or_none()
    if not channel:
        raise NotFoundError("Channel")

    subscribed_to = await db.scalar(
        select(func.count()).select_from(SubscriptionModel).where(SubscriptionModel.subscriber_id == channel.id)
    )
    video_conditions = [VideoModel.owner_id == channel.id]
    if viewer_id != channel.id:
        video_conditions.extend(listed_video_conditions())
    videos_count = await db.scalar(select(func.count()).select_from(VideoModel).where(*video_conditions))

    return {
        "id": channel.id,
        "fullName": channel.full_name,
        "username": channel.username,
        "avatarUrl": channel.avatar_url or "",
        "coverUrl": channel.cover_url or "",
        "bio": channel.bio or "",
        "subscribersCount": await subscribers_count(db, channel.id),
        "channelsSubscribedToCount": subscribed_to or 0,
        "videosCount": videos_count or 0,
        "isSubscribed": channel.id in await load_viewer_subscriptions(db, viewer_id, [channel.id]),
        "createdAt": channel.created_at,
    }
