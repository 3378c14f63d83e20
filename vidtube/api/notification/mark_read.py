from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_notification as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.notification_view import get_own_notification, compose_notifications
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response
from vidtube.utility.time import utc_now


@router.patch("/{notificationId}/read")
async def mark_as_read(
        notificationId: PathId,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    notification = await get_own_notification(db, notificationId, current_user.id)
    if not notification.is_read:
        notification.is_read = True
        notification.read_at = utc_now()
        await db.commit()

    [composed] = await compose_notifications(db, [notification])
    return api_response("Notification marked as read", composed)
