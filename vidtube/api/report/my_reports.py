from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.report.all_reports import paginated_reports
from vidtube.api.router_base import router_report as router
from vidtube.db.dependency import get_db
from vidtube.model.report import ReportModel
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.utility.response import paginated_response


@router.get("/my-reports")
async def get_my_reports(
        page: str | None = None,
        limit: str | None = None,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    result = await paginated_reports(db, [ReportModel.reported_by == current_user.id], page, limit)
    return paginated_response("Your reports fetched successfully", result)
