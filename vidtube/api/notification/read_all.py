from fastapi import Depends
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_notification as router
from vidtube.db.dependency import get_db
from vidtube.model.notification import NotificationModel
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.utility.response import api_response
from vidtube.utility.time import utc_now


@router.patch("/read-all")
async def mark_all_as_read(
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    result = await db.execute(
        update(NotificationModel)
        .where(NotificationModel.recipient_id == current_user.id, NotificationModel.is_read.is_(False))
        .values(is_read=True, read_at=utc_now())
    )
    await db.commit()
    return api_response("All notifications marked as read", {"modifiedCount": result.rowcount})
