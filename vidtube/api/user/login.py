from fastapi import Depends
from pydantic import BaseModel, Field
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_user as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import issue_tokens, set_auth_cookies
from vidtube.service.engagement import shape_user
from vidtube.utility.errors import UnauthorizedError, ValidationError
from vidtube.utility.response import api_response
from vidtube.utility.security import verify_password


class LoginRequest(BaseModel):
    email: str | None = None
    username: str | None = None
    password: str = Field(..., min_length=1)


@router.post("/login")
async def login(data: LoginRequest, db: AsyncSession = Depends(get_db)):
    if not data.email and not data.username:
        raise ValidationError(
            "Please provide either email or username to login",
            [{"field": "email", "message": "email or username is required"}],
        )
    if data.email:
        query = select(UserModel).where(UserModel.email == data.email.strip().lower())
    else:
        query = select(UserModel).where(UserModel.username == data.username.strip().lower())
    user = (await db.execute(query)).scalar_one_or_none()

    if not user or not verify_password(data.password, user.password):
        raise UnauthorizedError("Invalid credentials")

    access_token, refresh_token = await issue_tokens(db, user)

    response = api_response(
        "User logged in successfully",
        {"user": shape_user(user), "accessToken": access_token, "refreshToken": refresh_token},
    )
    set_auth_cookies(response, access_token, refresh_token)
    return response
