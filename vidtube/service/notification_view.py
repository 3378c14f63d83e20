from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.model.notification import NotificationModel
from vidtube.service.engagement import load_users, load_videos, shape_owner
from vidtube.service.ownership import get_owned


def shape_notification(notification: NotificationModel, related_video=None, related_user=None) -> dict:
    return {
        "id": notification.id,
        "recipient": notification.recipient_id,
        "type": notification.type.value,
        "title": notification.title,
        "message": notification.message,
        "relatedVideo": {
            "id": related_video.id,
            "title": related_video.title,
            "thumbnailUrl": related_video.thumbnail_url or "",
        } if related_video else None,
        "relatedUser": shape_owner(related_user),
        "isRead": bool(notification.is_read),
        "readAt": notification.read_at,
        "createdAt": notification.created_at,
    }


async def compose_notifications(db: AsyncSession, notifications: list[NotificationModel]) -> list[dict]:
    videos = await load_videos(db, [n.related_video_id for n in notifications])
    users = await load_users(db, [n.related_user_id for n in notifications])
    return [
        shape_notification(n, videos.get(n.related_video_id), users.get(n.related_user_id))
        for n in notifications
    ]


async def get_own_notification(db: AsyncSession, notification_id: int, recipient_id: int) -> NotificationModel:
    return await get_owned(db, NotificationModel, notification_id, recipient_id, "Notification", owner_field="recipient_id")


def own_notifications(recipient_id: int, unread_only: bool = False):
    query = select(NotificationModel).where(NotificationModel.recipient_id == recipient_id)
    if unread_only:
        query = query.where(NotificationModel.is_read.is_(False))
    return query
