from fastapi import Request, Depends
from pydantic import BaseModel
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_user as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel, RefreshTokenModel
from vidtube.service.auth import REFRESH_COOKIE, get_current_user, clear_auth_cookies
from vidtube.utility.response import api_response


class LogoutRequest(BaseModel):
    refreshToken: str | None = None


@router.post("/logout")
async def logout(
        request: Request,
        data: LogoutRequest | None = None,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    refresh_token = request.cookies.get(REFRESH_COOKIE) or (data.refreshToken if data else None)
    if refresh_token:
        await db.execute(
            delete(RefreshTokenModel).where(
                RefreshTokenModel.user_id == current_user.id,
                RefreshTokenModel.token == refresh_token,
            )
        )
        await db.commit()

    response = api_response("User logged out successfully")
    clear_auth_cookies(response)
    return response
