from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_user as router
from vidtube.db.dependency import get_db
from vidtube.model.notification import NotificationType
from vidtube.model.subscription import SubscriptionModel
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.notification import notify
from vidtube.service.toggle import toggle
from vidtube.service.user import get_user_or_404, subscribers_count
from vidtube.utility.errors import field_error
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


@router.post("/toggle-subscription/{channelId}")
async def toggle_subscription(
        channelId: PathId,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    subscriber_id = current_user.id
    subscriber_name = current_user.username

    await get_user_or_404(db, channelId, "Channel")
    if channelId == subscriber_id:
        raise field_error("channelId", "You cannot subscribe to your own channel")

    result = await toggle(db, SubscriptionModel, subscriber_id=subscriber_id, channel_id=channelId)
    if result.created:
        await notify(
            channelId,
            subscriber_id,
            NotificationType.SUBSCRIPTION,
            "New subscriber",
            f"{subscriber_name} subscribed to your channel",
        )

    return api_response(
        "Subscribed successfully" if result.is_on else "Unsubscribed successfully",
        {
            "channelId": channelId,
            "isSubscribed": result.is_on,
            "action": "subscribed" if result.is_on else "unsubscribed",
            "subscribersCount": await subscribers_count(db, channelId),
        },
    )
