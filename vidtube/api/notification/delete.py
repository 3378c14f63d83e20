from fastapi import Depends
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_notification as router
from vidtube.db.dependency import get_db
from vidtube.model.notification import NotificationModel
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.notification_view import get_own_notification
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


@router.delete("/{notificationId}")
async def delete_notification(
        notificationId: PathId,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    await get_own_notification(db, notificationId, current_user.id)
    await db.execute(delete(NotificationModel).where(NotificationModel.id == notificationId))
    await db.commit()
    return api_response("Notification deleted successfully")
