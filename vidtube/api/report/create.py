from fastapi import Depends, status
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_report as router
from vidtube.db.dependency import get_db
from vidtube.model.report import ReportModel, ReportType, ReportReason
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.report import ensure_reported_item_exists, compose_reports
from vidtube.utility.errors import ConflictError
from vidtube.utility.logger import get_logger
from vidtube.utility.fields import RowId
from vidtube.utility.response import api_response

logger = get_logger("report")


class CreateReportRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    type: ReportType
    reportedItem: RowId
    reason: ReportReason
    description: str = Field("", max_length=1000)


@router.post("")
async def create_report(
        data: CreateReportRequest,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    report_type = data.type
    await ensure_reported_item_exists(db, report_type, data.reportedItem)

    duplicate = await db.scalar(
        select(ReportModel.id).where(
            ReportModel.reported_by == current_user.id,
            ReportModel.type == report_type,
            ReportModel.reported_item == data.reportedItem,
        )
    )
    if duplicate is not None:
        raise ConflictError("You have already reported this item", "reportedItem")

    report = ReportModel(
        reported_by=current_user.id,
        type=report_type,
        reported_item=data.reportedItem,
        reason=data.reason,
        description=data.description,
    )
    db.add(report)
    await db.commit()
    await db.refresh(report)
    logger.info("Report %s filed on %s %s", report.id, report_type.value, data.reportedItem)

    [composed] = await compose_reports(db, [report])
    return api_response("Report submitted successfully", composed, status.HTTP_201_CREATED)
