from fastapi import Request, Depends
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_user as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel, RefreshTokenModel
from vidtube.service.auth import REFRESH_COOKIE, issue_tokens, revoke_refresh_token, set_auth_cookies
from vidtube.utility.errors import UnauthorizedError
from vidtube.utility.response import api_response
from vidtube.utility.security import decode_refresh_token


class RefreshTokenRequest(BaseModel):
    refreshToken: str | None = None


@router.post("/refresh-token")
async def refresh_access_token(
        request: Request,
        data: RefreshTokenRequest | None = None,
        db: AsyncSession = Depends(get_db)
):
    incoming_token = request.cookies.get(REFRESH_COOKIE) or (data.refreshToken if data else None)
    if not incoming_token:
        raise UnauthorizedError("Unauthorized request")

    user_id = decode_refresh_token(incoming_token)
    if user_id is None:
        raise UnauthorizedError("Invalid refresh token")

    stored = await db.scalar(
        select(RefreshTokenModel.id).where(
            RefreshTokenModel.user_id == user_id,
            RefreshTokenModel.token == incoming_token,
        )
    )
    if stored is None:
        raise UnauthorizedError("Refresh token is expired or used")

    user = (await db.execute(select(UserModel).where(UserModel.id == user_id))).scalar_one_or_none()
    if not user:
        raise UnauthorizedError("Invalid refresh token")

    # a refresh token works exactly once
    await revoke_refresh_token(db, incoming_token)
    access_token, refresh_token = await issue_tokens(db, user)

    response = api_response(
        "Access token refreshed",
        {"accessToken": access_token, "refreshToken": refresh_token},
    )
    set_auth_cookies(response, access_token, refresh_token)
    return response
