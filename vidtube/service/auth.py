from fastapi import Request, Response, Depends
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.config.environments import (
    COOKIE_SECURE,
    COOKIE_SAMESITE,
    ACCESS_TOKEN_EXPIRE_TIME,
    REFRESH_TOKEN_EXPIRE_TIME,
)
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel, RefreshTokenModel
from vidtube.utility.errors import UnauthorizedError
from vidtube.utility.security import (
    create_access_token,
    create_refresh_token,
    decode_access_token,
)

ACCESS_COOKIE = "accessToken"
REFRESH_COOKIE = "refreshToken"


def read_access_token(request: Request) -> str | None:
    authorization = request.headers.get("Authorization", "")
    if authorization.startswith("Bearer "):
        return authorization[len("Bearer "):].strip() or None
    return request.cookies.get(ACCESS_COOKIE)


async def _user_from_token(token: str | None, db: AsyncSession) -> UserModel | None:
    if not token:
        return None
    user_id = decode_access_token(token)
    if user_id is None:
        return None
    result = await db.execute(select(UserModel).where(UserModel.id == user_id))
    return result.scalar_one_or_none()


async def get_current_user(request: Request, db: AsyncSession = Depends(get_db)) -> UserModel:
    token = read_access_token(request)
    if not token:
        raise UnauthorizedError("Login required")

    user = await _user_from_token(token, db)
    if not user:
        raise UnauthorizedError("Invalid or expired access token")
    return user


async def get_optional_user(request: Request, db: AsyncSession = Depends(get_db)) -> UserModel | None:
    """Like get_current_user, but anonymous or invalid credentials yield None."""
    return await _user_from_token(read_access_token(request), db)


async def issue_tokens(db: AsyncSession, user: UserModel) -> tuple[str, str]:
    """Mint an access/refresh pair and remember the refresh token for the user."""
    access_token = create_access_token(user)
    refresh_token = create_refresh_token(user)

    db.add(RefreshTokenModel(user_id=user.id, token=refresh_token))
    await db.commit()
    return access_token, refresh_token


async def revoke_refresh_token(db: AsyncSession, token: str) -> int:
    result = await db.execute(delete(RefreshTokenModel).where(RefreshTokenModel.token == token))
    await db.commit()
    return result.rowcount


async def revoke_all_refresh_tokens(db: AsyncSession, user_id: int):
    await db.execute(delete(RefreshTokenModel).where(RefreshTokenModel.user_id == user_id))
    await db.commit()


def set_auth_cookies(response: Response, access_token: str, refresh_token: str):
    response.set_cookie(
        key=ACCESS_COOKIE,
        value=access_token,
        httponly=True,
        max_age=ACCESS_TOKEN_EXPIRE_TIME,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE
    )
    response.set_cookie(
        key=REFRESH_COOKIE,
        value=refresh_token,
        httponly=True,
        max_age=REFRESH_TOKEN_EXPIRE_TIME,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE
    )


def clear_auth_cookies(response: Response):
    for key in (ACCESS_COOKIE, REFRESH_COOKIE):
        response.delete_cookie(
            key,
            httponly=True,
            secure=COOKIE_SECURE,
            samesite=COOKIE_SAMESITE
        )
