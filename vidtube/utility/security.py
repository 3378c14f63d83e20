import uuid
from datetime import timedelta, UTC, datetime
import jwt
from passlib.context import CryptContext
from vidtube.config.environments import (
    ACCESS_TOKEN_SECRET,
    REFRESH_TOKEN_SECRET,
    ACCESS_TOKEN_EXPIRE_TIME,
    REFRESH_TOKEN_EXPIRE_TIME,
)

JWT_ALGORITHM = "HS256"

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def _encode(claims: dict, secret: str, expires_in: int) -> str:
    issued_at = datetime.now(UTC)
    payload = {
        **claims,
        "iat": issued_at,
        "exp": issued_at + timedelta(seconds=expires_in),
        # two tokens minted in the same second must still differ
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def create_access_token(user) -> str:
    return _encode(
        {
            "sub": str(user.id),
            "username": user.username,
            "email": user.email,
            "fullName": user.full_name,
            "type": "access",
        },
        ACCESS_TOKEN_SECRET,
        ACCESS_TOKEN_EXPIRE_TIME,
    )


def create_refresh_token(user) -> str:
    return _encode({"sub": str(user.id), "type": "refresh"}, REFRESH_TOKEN_SECRET, REFRESH_TOKEN_EXPIRE_TIME)


def _decode(token: str, secret: str, token_type: str) -> int | None:
    try:
        payload = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except jwt.PyJWTError:
        return None

    if payload.get("type") != token_type:
        return None
    try:
        return int(payload["sub"])
    except (KeyError, TypeError, ValueError):
        return None


def decode_access_token(token: str) -> int | None:
    """Return the user id carried by a valid access token, None otherwise."""
    return _decode(token, ACCESS_TOKEN_SECRET, "access")


def decode_refresh_token(token: str) -> int | None:
    return _decode(token, REFRESH_TOKEN_SECRET, "refresh")
