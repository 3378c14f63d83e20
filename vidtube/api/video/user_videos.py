from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_video as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import get_optional_user
from vidtube.service.user import get_user_or_404
from vidtube.service.video import list_user_videos
from vidtube.utility.pagination import get_pagination_params, get_sort_params
from vidtube.utility.fields import PathId
from vidtube.utility.response import paginated_response


@router.get("/user/{userId}")
async def get_user_videos(
        userId: PathId,
        page: str | None = None,
        limit: str | None = None,
        sortBy: str | None = None,
        sortType: str | None = None,
        viewer: UserModel | None = Depends(get_optional_user),
        db: AsyncSession = Depends(get_db)
):
    await get_user_or_404(db, userId)

    params = get_pagination_params(page, limit)
    sort_by, descending = get_sort_params(sortBy, sortType)
    result = await list_user_videos(db, userId, params, sort_by, descending, viewer.id if viewer else None)
    return paginated_response("User videos fetched successfully", result)
