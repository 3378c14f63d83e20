from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_like as router
from vidtube.db.dependency import get_db
from vidtube.model.like import LikeModel, LikeTarget
from vidtube.model.notification import NotificationType
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.engagement import count_likes
from vidtube.service.notification import notify
from vidtube.service.toggle import toggle
from vidtube.service.visibility import get_visible_video
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


@router.post("/toggle/v/{videoId}")
async def toggle_video_like(
        videoId: PathId,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    actor_id, actor_name = current_user.id, current_user.username
    video = await get_visible_video(db, videoId, actor_id)
    owner_id, title = video.owner_id, video.title

    result = await toggle(db, LikeModel, target_kind=LikeTarget.VIDEO, target_id=videoId, liked_by=actor_id)
    if result.created:
        await notify(
            owner_id, actor_id, NotificationType.LIKE,
            "New like", f"{actor_name} liked your video {title}",
            related_video_id=videoId,
        )

    likes = await count_likes(db, LikeTarget.VIDEO, [videoId])
    return api_response(
        "Video liked" if result.is_on else "Video unliked",
        {"videoId": videoId, "isLiked": result.is_on, "likesCount": likes.get(videoId, 0)},
    )
