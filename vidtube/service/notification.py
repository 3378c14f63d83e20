from vidtube.db.database import AsyncSessionLocal
from vidtube.model.notification import NotificationModel, NotificationType
from vidtube.utility.logger import get_logger

logger = get_logger("notification")


async def notify(
        recipient_id: int,
        actor_id: int | None,
        notification_type: NotificationType,
        title: str,
        message: str,
        related_video_id: int | None = None,
) -> bool:
    """
    Best-effort notification in its own short-lived session.

    Call it after the triggering change is committed. Nobody is notified about
    their own actions, and a failure here is logged, never raised.
    """
    if recipient_id is None or recipient_id == actor_id:
        return False

    try:
        async with AsyncSessionLocal() as db:
            db.add(NotificationModel(
                recipient_id=recipient_id,
                type=notification_type,
                title=title,
                message=message,
                related_video_id=related_video_id,
                related_user_id=actor_id,
            ))
            await db.commit()
        return True
    except Exception:
        logger.exception("Failed to create %s notification for user %s", notification_type.value, recipient_id)
        return False
