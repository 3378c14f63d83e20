from fastapi import Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_notification as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.notification_view import own_notifications
from vidtube.utility.response import api_response


@router.get("/unread/count")
async def get_unread_count(
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    query = own_notifications(current_user.id, unread_only=True)
    unread_count = await db.scalar(select(func.count()).select_from(query.subquery()))
    return api_response("Unread count fetched successfully", {"unreadCount": unread_count or 0})
