from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Index
from vidtube.db.database import Base
from vidtube.utility.time import utc_now

COMMENT_MAX_LENGTH = 1000


class CommentModel(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    content = Column(String(COMMENT_MAX_LENGTH), nullable=False)
    video_id = Column(Integer, ForeignKey("videos.id", ondelete="CASCADE"), nullable=False)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    parent_id = Column(Integer, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True, index=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)

    __table_args__ = (
        Index("ix_comments_video_created_at", "video_id", "created_at"),
    )
