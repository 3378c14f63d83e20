from sqlalchemy import Column, Integer, DateTime, Enum, ForeignKey, UniqueConstraint, Index
from vidtube.db.database import Base
from vidtube.utility.time import utc_now
import enum


class LikeTarget(str, enum.Enum):
    """Kind of row a like points at; target_id is that row's id"""
    VIDEO = "video"
    COMMENT = "comment"


class LikeModel(Base):
    __tablename__ = "likes"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    target_kind = Column(Enum(LikeTarget), nullable=False)
    target_id = Column(Integer, nullable=False)
    liked_by = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=utc_now)

    __table_args__ = (
        UniqueConstraint("target_kind", "target_id", "liked_by", name="uq_likes_target_liked_by"),
        Index("ix_likes_target", "target_kind", "target_id"),
    )
