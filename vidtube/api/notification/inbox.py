from fastapi import Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_notification as router
from vidtube.db.dependency import get_db
from vidtube.model.notification import NotificationModel
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.notification_view import own_notifications, compose_notifications
from vidtube.utility.pagination import get_pagination_params, Page
from vidtube.utility.response import paginated_response


@router.get("")
async def get_notifications(
        page: str | None = None,
        limit: str | None = None,
        unreadOnly: str | None = None,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    params = get_pagination_params(page, limit)
    query = own_notifications(current_user.id, unread_only=unreadOnly == "true")

    total = await db.scalar(select(func.count()).select_from(query.subquery()))
    result = await db.execute(
        query.order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        .offset(params.skip)
        .limit(params.limit)
    )
    docs = await compose_notifications(db, list(result.scalars().all()))
    return paginated_response("Notifications fetched successfully", Page(params, total or 0, docs))
