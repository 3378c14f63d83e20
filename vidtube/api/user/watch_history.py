from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_user as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.video import watch_history
from vidtube.utility.pagination import get_pagination_params
from vidtube.utility.response import paginated_response


@router.get("/watch-history")
async def get_watch_history(
        page: str | None = None,
        limit: str | None = None,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    params = get_pagination_params(page, limit)
    result = await watch_history(db, current_user.id, params)
    return paginated_response("Watch history fetched successfully", result)
