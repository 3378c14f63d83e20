from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_video as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import get_optional_user
from vidtube.service.video import list_videos
from vidtube.utility.pagination import get_pagination_params, get_sort_params
from vidtube.utility.response import paginated_response


@router.get("")
async def get_all_videos(
        page: str | None = None,
        limit: str | None = None,
        sortBy: str | None = None,
        sortType: str | None = None,
        category: str | None = None,
        viewer: UserModel | None = Depends(get_optional_user),
        db: AsyncSession = Depends(get_db)
):
    params = get_pagination_params(page, limit)
    sort_by, descending = get_sort_params(sortBy, sortType)
    result = await list_videos(db, params, sort_by, descending, category, viewer.id if viewer else None)
    return paginated_response("Videos fetched successfully", result)
