from fastapi import Depends, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_notification as router
from vidtube.db.dependency import get_db
from vidtube.model.notification import NotificationModel, NotificationType
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.notification_view import compose_notifications
from vidtube.service.user import get_user_or_404
from vidtube.service.visibility import get_video_or_404
from vidtube.utility.fields import RowId
from vidtube.utility.response import api_response


class CreateNotificationRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    recipient: RowId
    type: NotificationType
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=500)
    relatedVideo: RowId | None = None
    relatedUser: RowId | None = None


@router.post("")
async def create_notification(
        data: CreateNotificationRequest,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    await get_user_or_404(db, data.recipient, "Recipient")
    if data.relatedVideo is not None:
        await get_video_or_404(db, data.relatedVideo)
    if data.relatedUser is not None:
        await get_user_or_404(db, data.relatedUser)

    notification = NotificationModel(
        recipient_id=data.recipient,
        type=data.type,
        title=data.title,
        message=data.message,
        related_video_id=data.relatedVideo,
        related_user_id=data.relatedUser,
    )
    db.add(notification)
    await db.commit()
    await db.refresh(notification)

    [composed] = await compose_notifications(db, [notification])
    return api_response("Notification created successfully", composed, status.HTTP_201_CREATED)
