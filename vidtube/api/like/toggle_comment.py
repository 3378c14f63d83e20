from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_like as router
from vidtube.db.dependency import get_db
from vidtube.model.like import LikeModel, LikeTarget
from vidtube.model.notification import NotificationType
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.comment import get_comment_or_404
from vidtube.service.engagement import count_likes
from vidtube.service.notification import notify
from vidtube.service.toggle import toggle
from vidtube.service.visibility import get_visible_video
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


@router.post("/toggle/c/{commentId}")
async def toggle_comment_like(
        commentId: PathId,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    actor_id, actor_name = current_user.id, current_user.username
    comment = await get_comment_or_404(db, commentId)
    owner_id, video_id = comment.owner_id, comment.video_id
    await get_visible_video(db, video_id, actor_id)

    result = await toggle(db, LikeModel, target_kind=LikeTarget.COMMENT, target_id=commentId, liked_by=actor_id)
    if result.created:
        await notify(
            owner_id, actor_id, NotificationType.LIKE,
            "New like", f"{actor_name} liked your comment",
            related_video_id=video_id,
        )

    likes = await count_likes(db, LikeTarget.COMMENT, [commentId])
    return api_response(
        "Comment liked" if result.is_on else "Comment unliked",
        {"commentId": commentId, "isLiked": result.is_on, "likesCount": likes.get(commentId, 0)},
    )
