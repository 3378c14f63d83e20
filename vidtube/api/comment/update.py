from fastapi import Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_comment as router
from vidtube.db.dependency import get_db
from vidtube.model.comment import CommentModel
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.comment import CommentContent
from vidtube.service.engagement import compose_comments
from vidtube.service.ownership import get_owned
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


class UpdateCommentRequest(BaseModel):
    content: CommentContent


@router.patch("/c/{commentId}")
async def update_comment(
        commentId: PathId,
        data: UpdateCommentRequest,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    comment = await get_owned(db, CommentModel, commentId, current_user.id, "Comment")
    comment.content = data.content
    await db.commit()
    await db.refresh(comment)

    [composed] = await compose_comments(db, [comment], current_user.id)
    return api_response("Comment updated successfully", composed)
