from fastapi import Depends
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_report as router
from vidtube.db.dependency import get_db
from vidtube.model.report import ReportStatus
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.report import get_report_or_404, compose_reports
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response
from vidtube.utility.time import utc_now


class UpdateReportRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    status: ReportStatus
    resolution: str | None = Field(None, max_length=500)


@router.patch("/{reportId}")
async def update_report_status(
        reportId: PathId,
        data: UpdateReportRequest,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    new_status = data.status

    report = await get_report_or_404(db, reportId)
    report.status = new_status
    if data.resolution is not None:
        report.resolution = data.resolution
    if new_status != ReportStatus.PENDING:
        report.reviewed_by = current_user.id
        report.reviewed_at = utc_now()

    await db.commit()
    await db.refresh(report)

    [composed] = await compose_reports(db, [report])
    return api_response("Report updated successfully", composed)
