from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum, ForeignKey, Index
from vidtube.db.database import Base
from vidtube.utility.time import utc_now
import enum


class NotificationType(str, enum.Enum):
    LIKE = "like"
    COMMENT = "comment"
    SUBSCRIPTION = "subscription"
    VIDEO_UPLOAD = "video_upload"
    MENTION = "mention"
    SYSTEM = "system"


class NotificationModel(Base):
    __tablename__ = "notifications"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    recipient_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    type = Column(Enum(NotificationType), nullable=False)
    title = Column(String(200), nullable=False)
    message = Column(String(500), nullable=False)
    related_video_id = Column(Integer, ForeignKey("videos.id", ondelete="SET NULL"), nullable=True)
    related_user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    is_read = Column(Boolean, nullable=False, default=False)
    read_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    __table_args__ = (
        Index("ix_notifications_recipient_read_created_at", "recipient_id", "is_read", "created_at"),
    )
