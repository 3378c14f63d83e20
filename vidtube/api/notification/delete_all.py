from fastapi import Depends
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_notification as router
from vidtube.db.dependency import get_db
from vidtube.model.notification import NotificationModel
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.utility.response import api_response


@router.delete("")
async def delete_all_notifications(
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    result = await db.execute(delete(NotificationModel).where(NotificationModel.recipient_id == current_user.id))
    await db.commit()
    return api_response("All notifications deleted successfully", {"deletedCount": result.rowcount})
