from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_comment as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.model.video import VideoModel
from vidtube.service.auth import get_current_user
from vidtube.service.comment import get_comment_or_404, delete_comment_thread
from vidtube.utility.errors import ForbiddenError
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


@router.delete("/c/{commentId}")
async def delete_comment(
        commentId: PathId,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    comment = await get_comment_or_404(db, commentId)

    # the author or the owner of the video it was posted on
    if comment.owner_id != current_user.id:
        video_owner_id = await db.scalar(select(VideoModel.owner_id).where(VideoModel.id == comment.video_id))
        if video_owner_id != current_user.id:
            raise ForbiddenError("You are not allowed to delete this comment")

    deleted_count = await delete_comment_thread(db, commentId)
    return api_response("Comment deleted successfully", {"commentId": commentId, "deletedCount": deleted_count})
