from sqlalchemy import Column, Integer, String, Float, Boolean, DateTime, Enum, JSON, ForeignKey, CheckConstraint, Index
from vidtube.db.database import Base
from vidtube.utility.time import utc_now
import enum


class VideoPrivacy(str, enum.Enum):
    """Who can reach a published video"""
    PUBLIC = "public"  # listed and searchable
    UNLISTED = "unlisted"  # reachable by id only
    PRIVATE = "private"  # owner only


class VideoModel(Base):
    __tablename__ = "videos"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(String(5000), nullable=False, default="")
    url = Column(String, nullable=False)
    thumbnail_url = Column(String, nullable=False, default="")
    videoformat = Column(String(20), nullable=False)
    duration = Column(Float, nullable=False)  # seconds
    views = Column(Integer, nullable=False, default=0)
    is_published = Column(Boolean, nullable=False, default=True)
    privacy = Column(Enum(VideoPrivacy), nullable=False, default=VideoPrivacy.PUBLIC)
    category = Column(String, nullable=False, default="general")
    tags = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    __table_args__ = (
        CheckConstraint("duration > 0", name="ck_videos_duration_positive"),
        Index("ix_videos_published_created_at", "is_published", "created_at"),
    )


class WatchHistoryModel(Base):
    """One row per (user, video); the first insertion is the one that counts a view"""
    __tablename__ = "watch_history"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    video_id = Column(Integer, ForeignKey("videos.id", ondelete="CASCADE"), nullable=False, index=True)
    watched_at = Column(DateTime, nullable=False, default=utc_now)

    __table_args__ = (
        Index("uq_watch_history_user_video", "user_id", "video_id", unique=True),
    )
