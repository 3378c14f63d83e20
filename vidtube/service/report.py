from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.model.comment import CommentModel
from vidtube.model.report import ReportModel, ReportType
from vidtube.model.user import UserModel
from vidtube.model.video import VideoModel
from vidtube.service.engagement import load_users
from vidtube.utility.errors import NotFoundError

REPORTED_ITEM_MODELS = {
    ReportType.VIDEO: (VideoModel, "Video"),
    ReportType.COMMENT: (CommentModel, "Comment"),
    ReportType.USER: (UserModel, "User"),
    ReportType.CHANNEL: (UserModel, "Channel"),
}


async def ensure_reported_item_exists(db: AsyncSession, report_type: ReportType, item_id: int):
    model, resource = REPORTED_ITEM_MODELS[report_type]
    if await db.scalar(select(model.id).where(model.id == item_id)) is None:
        raise NotFoundError(resource)


def _user_summary(user: UserModel | None) -> dict | None:
    if user is None:
        return None
    return {"id": user.id, "username": user.username, "fullName": user.full_name}


def shape_report(report: ReportModel, reporter: UserModel | None = None, reviewer: UserModel | None = None) -> dict:
    return {
        "id": report.id,
        "reportedBy": _user_summary(reporter) or report.reported_by,
        "type": report.type.value,
        "reportedItem": report.reported_item,
        "reason": report.reason.value,
        "description": report.description or "",
        "status": report.status.value,
        "reviewedBy": _user_summary(reviewer) if reviewer else report.reviewed_by,
        "reviewedAt": report.reviewed_at,
        "resolution": report.resolution or "",
        "createdAt": report.created_at,
        "updatedAt": report.updated_at,
    }


async def compose_reports(db: AsyncSession, reports: list[ReportModel]) -> list[dict]:
    users = await load_users(db, [r.reported_by for r in reports] + [r.reviewed_by for r in reports])
    return [shape_report(r, users.get(r.reported_by), users.get(r.reviewed_by)) for r in reports]


async def get_report_or_404(db: AsyncSession, report_id: int) -> ReportModel:
    report = (await db.execute(select(ReportModel).where(ReportModel.id == report_id))).scalar_one_or_none()
    if not report:
        raise NotFoundError("Report")
    return report
