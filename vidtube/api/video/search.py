from typing import Annotated
from fastapi import Depends, Query
from pydantic import StringConstraints
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_video as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import get_optional_user
from vidtube.service.search import search_videos
from vidtube.utility.pagination import get_pagination_params
from vidtube.utility.response import paginated_response

SEARCH_QUERY_MAX_LENGTH = 100

SearchQuery = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=SEARCH_QUERY_MAX_LENGTH)]


@router.get("/search")
async def search(
        query: Annotated[SearchQuery, Query()],
        page: str | None = None,
        limit: str | None = None,
        viewer: UserModel | None = Depends(get_optional_user),
        db: AsyncSession = Depends(get_db)
):
    params = get_pagination_params(page, limit)
    result = await search_videos(db, query, params, viewer.id if viewer else None)
    return paginated_response("Search results fetched successfully", result)
