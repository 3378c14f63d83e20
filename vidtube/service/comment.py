from typing import Annotated
from pydantic import StringConstraints
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.model.comment import CommentModel, COMMENT_MAX_LENGTH
from vidtube.model.like import LikeModel, LikeTarget
from vidtube.utility.errors import NotFoundError

CommentContent = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=COMMENT_MAX_LENGTH)]


async def get_comment_or_404(db: AsyncSession, comment_id: int) -> CommentModel:
    comment = (await db.execute(select(CommentModel).where(CommentModel.id == comment_id))).scalar_one_or_none()
    if not comment:
        raise NotFoundError("Comment")
    return comment


async def delete_comment_thread(db: AsyncSession, comment_id: int) -> int:
    """Delete a comment with every reply below it and the likes on all of them."""
    thread_ids = [comment_id]
    frontier = [comment_id]
    while frontier:
        result = await db.execute(select(CommentModel.id).where(CommentModel.parent_id.in_(frontier)))
        frontier = [i for i in result.scalars().all() if i not in thread_ids]
        thread_ids.extend(frontier)

    await db.execute(
        delete(LikeModel).where(LikeModel.target_kind == LikeTarget.COMMENT, LikeModel.target_id.in_(thread_ids))
    )
    await db.execute(delete(CommentModel).where(CommentModel.id.in_(thread_ids)))
    await db.commit()
    return len(thread_ids)
