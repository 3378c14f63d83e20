from fastapi import Depends, status
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_comment as router
from vidtube.db.dependency import get_db
from vidtube.model.comment import CommentModel
from vidtube.model.notification import NotificationType
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.comment import CommentContent, get_comment_or_404
from vidtube.service.engagement import compose_comments
from vidtube.service.notification import notify
from vidtube.service.visibility import get_visible_video
from vidtube.utility.errors import field_error
from vidtube.utility.fields import PathId, RowId
from vidtube.utility.response import api_response


class AddCommentRequest(BaseModel):
    content: CommentContent
    parent: RowId | None = None


@router.post("/{videoId}")
async def add_comment(
        videoId: PathId,
        data: AddCommentRequest,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    video = await get_visible_video(db, videoId, current_user.id)

    parent = None
    if data.parent is not None:
        parent = await get_comment_or_404(db, data.parent)
        if parent.video_id != video.id:
            raise field_error("parent", "Parent comment does not belong to this video")

    comment = CommentModel(
        content=data.content,
        video_id=video.id,
        owner_id=current_user.id,
        parent_id=parent.id if parent else None,
    )
    db.add(comment)
    await db.commit()
    await db.refresh(comment)

    if parent:
        await notify(
            parent.owner_id, current_user.id, NotificationType.COMMENT,
            "New reply", f"{current_user.username} replied to your comment",
            related_video_id=video.id,
        )
    else:
        await notify(
            video.owner_id, current_user.id, NotificationType.COMMENT,
            "New comment", f"{current_user.username} commented on {video.title}",
            related_video_id=video.id,
        )

    [composed] = await compose_comments(db, [comment], current_user.id)
    return api_response("Comment added successfully", composed, status.HTTP_201_CREATED)
