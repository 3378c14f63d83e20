from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_report as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.report import get_report_or_404, compose_reports
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


@router.get("/{reportId}")
async def get_report(
        reportId: PathId,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    report = await get_report_or_404(db, reportId)
    [composed] = await compose_reports(db, [report])
    return api_response("Report fetched successfully", composed)
