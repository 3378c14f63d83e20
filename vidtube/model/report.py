from sqlalchemy import Column, Integer, String, DateTime, Enum, ForeignKey, UniqueConstraint
from vidtube.db.database import Base
from vidtube.utility.time import utc_now
import enum


class ReportType(str, enum.Enum):
    """Kind of row reported_item points at"""
    VIDEO = "video"
    COMMENT = "comment"
    USER = "user"
    CHANNEL = "channel"  # a user, reported as a channel


class ReportReason(str, enum.Enum):
    SPAM = "spam"
    HARASSMENT = "harassment"
    HATE_SPEECH = "hate_speech"
    INAPPROPRIATE_CONTENT = "inappropriate_content"
    COPYRIGHT = "copyright"
    VIOLENCE = "violence"
    OTHER = "other"


class ReportStatus(str, enum.Enum):
    PENDING = "pending"  # Report created, nobody looked at it yet
    REVIEWING = "reviewing"
    RESOLVED = "resolved"
    DISMISSED = "dismissed"


class ReportModel(Base):
    __tablename__ = "reports"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    reported_by = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(Enum(ReportType), nullable=False)
    reported_item = Column(Integer, nullable=False)
    reason = Column(Enum(ReportReason), nullable=False)
    description = Column(String(1000), nullable=False, default="")
    status = Column(Enum(ReportStatus), nullable=False, default=ReportStatus.PENDING)
    reviewed_by = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    reviewed_at = Column(DateTime, nullable=True)
    resolution = Column(String(500), nullable=False, default="")
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    __table_args__ = (
        UniqueConstraint("reported_by", "type", "reported_item", name="uq_reports_reporter_item"),
    )
