from fastapi import Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_comment as router
from vidtube.db.dependency import get_db
from vidtube.model.comment import CommentModel
from vidtube.model.user import UserModel
from vidtube.service.auth import get_optional_user
from vidtube.service.engagement import compose_comments
from vidtube.service.visibility import get_visible_video
from vidtube.utility.pagination import get_pagination_params, Page
from vidtube.utility.fields import PathId
from vidtube.utility.response import paginated_response


@router.get("/{videoId}")
async def get_video_comments(
        videoId: PathId,
        page: str | None = None,
        limit: str | None = None,
        viewer: UserModel | None = Depends(get_optional_user),
        db: AsyncSession = Depends(get_db)
):
    viewer_id = viewer.id if viewer else None
    await get_visible_video(db, videoId, viewer_id)
    params = get_pagination_params(page, limit)

    top_level = [CommentModel.video_id == videoId, CommentModel.parent_id.is_(None)]
    total = await db.scalar(select(func.count()).select_from(CommentModel).where(*top_level))
    result = await db.execute(
        select(CommentModel)
        .where(*top_level)
        .order_by(CommentModel.created_at.desc(), CommentModel.id.desc())
        .offset(params.skip)
        .limit(params.limit)
    )
    comments = list(result.scalars().all())

    docs = await compose_comments(db, comments, viewer_id, with_replies=True)
    return paginated_response("Comments fetched successfully", Page(params, total or 0, docs))
