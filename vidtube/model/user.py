from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from vidtube.db.database import Base
from vidtube.utility.time import utc_now


class UserModel(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    username = Column(String(20), unique=True, nullable=False, index=True)  # always lowercase
    email = Column(String, unique=True, nullable=False, index=True)  # always lowercase
    full_name = Column(String(100), nullable=False)
    password = Column(String, nullable=False)
    avatar_url = Column(String, nullable=False, default="")
    cover_url = Column(String, nullable=False, default="")
    bio = Column(String(500), nullable=False, default="")
    created_at = Column(DateTime, nullable=False, default=utc_now)
    updated_at = Column(DateTime, nullable=False, default=utc_now, onupdate=utc_now)


class RefreshTokenModel(Base):
    """Refresh tokens currently valid for a user; a token is deleted once used."""
    __tablename__ = "refresh_tokens"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    token = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utc_now)
