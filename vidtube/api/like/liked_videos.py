from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_like as router
from vidtube.db.dependency import get_db
from vidtube.model.like import LikeModel, LikeTarget
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.engagement import compose_videos, load_videos
from vidtube.service.visibility import is_visible_to
from vidtube.utility.pagination import get_pagination_params, paginate_list, Page
from vidtube.utility.response import paginated_response


@router.get("/videos")
async def get_liked_videos(
        page: str | None = None,
        limit: str | None = None,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    params = get_pagination_params(page, limit)

    result = await db.execute(
        select(LikeModel.target_id, LikeModel.created_at)
        .where(LikeModel.liked_by == current_user.id, LikeModel.target_kind == LikeTarget.VIDEO)
        .order_by(LikeModel.created_at.desc(), LikeModel.id.desc())
    )
    likes = result.all()
    videos = await load_videos(db, [video_id for video_id, _ in likes])

    visible = [
        (videos[video_id], liked_at)
        for video_id, liked_at in likes
        if video_id in videos and is_visible_to(videos[video_id], current_user.id)
    ]
    page_items, total = paginate_list(visible, params)

    composed = await compose_videos(db, [video for video, _ in page_items], current_user.id)
    docs = [{"likedAt": liked_at, "video": video} for (_, liked_at), video in zip(page_items, composed)]
    return paginated_response("Liked videos fetched successfully", Page(params, total, docs))
