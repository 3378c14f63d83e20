from fastapi import Depends, Query
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_report as router
from vidtube.db.dependency import get_db
from vidtube.model.report import ReportModel, ReportStatus, ReportType
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.report import compose_reports
from vidtube.utility.pagination import get_pagination_params, Page
from vidtube.utility.response import paginated_response


async def paginated_reports(db: AsyncSession, conditions: list, page, limit) -> Page:
    params = get_pagination_params(page, limit)
    total = await db.scalar(select(func.count()).select_from(ReportModel).where(*conditions))
    result = await db.execute(
        select(ReportModel)
        .where(*conditions)
        .order_by(ReportModel.created_at.desc(), ReportModel.id.desc())
        .offset(params.skip)
        .limit(params.limit)
    )
    return Page(params, total or 0, await compose_reports(db, list(result.scalars().all())))


@router.get("")
async def get_reports(
        page: str | None = None,
        limit: str | None = None,
        status: ReportStatus | None = None,
        report_type: ReportType | None = Query(None, alias="type"),
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    conditions = []
    if status:
        conditions.append(ReportModel.status == status)
    if report_type:
        conditions.append(ReportModel.type == report_type)

    result = await paginated_reports(db, conditions, page, limit)
    return paginated_response("Reports fetched successfully", result)
