from fastapi import Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_playlist as router
from vidtube.db.dependency import get_db
from vidtube.model.playlist import PlaylistModel
from vidtube.model.user import UserModel
from vidtube.service.auth import get_optional_user
from vidtube.service.playlist import compose_playlists
from vidtube.service.user import get_user_or_404
from vidtube.utility.pagination import get_pagination_params, Page
from vidtube.utility.fields import PathId
from vidtube.utility.response import paginated_response


@router.get("/user/{userId}")
async def get_user_playlists(
        userId: PathId,
        page: str | None = None,
        limit: str | None = None,
        viewer: UserModel | None = Depends(get_optional_user),
        db: AsyncSession = Depends(get_db)
):
    await get_user_or_404(db, userId)
    params = get_pagination_params(page, limit)

    conditions = [PlaylistModel.owner_id == userId]
    if viewer is None or viewer.id != userId:
        conditions.append(PlaylistModel.is_public.is_(True))

    total = await db.scalar(select(func.count()).select_from(PlaylistModel).where(*conditions))
    result = await db.execute(
        select(PlaylistModel)
        .where(*conditions)
        .order_by(PlaylistModel.updated_at.desc(), PlaylistModel.id.desc())
        .offset(params.skip)
        .limit(params.limit)
    )
    docs = await compose_playlists(db, list(result.scalars().all()))
    return paginated_response("Playlists fetched successfully", Page(params, total or 0, docs))
