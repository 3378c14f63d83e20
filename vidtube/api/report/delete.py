from fastapi import Depends
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_report as router
from vidtube.db.dependency import get_db
from vidtube.model.report import ReportModel
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.report import get_report_or_404
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


@router.delete("/{reportId}")
async def delete_report(
        reportId: PathId,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    await get_report_or_404(db, reportId)
    await db.execute(delete(ReportModel).where(ReportModel.id == reportId))
    await db.commit()
    return api_response("Report deleted successfully")
