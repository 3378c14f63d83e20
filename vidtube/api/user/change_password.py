from fastapi import Depends
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_user as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user, revoke_all_refresh_tokens
from vidtube.utility.errors import UnauthorizedError, field_error
from vidtube.utility.fields import Password
from vidtube.utility.response import api_response
from vidtube.utility.security import hash_password, verify_password


class ChangePasswordRequest(BaseModel):
    currentPassword: str = Field(..., min_length=1)
    newPassword: Password


@router.patch("/change-password")
async def change_password(
        data: ChangePasswordRequest,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    if not verify_password(data.currentPassword, current_user.password):
        raise UnauthorizedError("Current password is incorrect")
    if data.newPassword == data.currentPassword:
        raise field_error("newPassword", "New password must be different from the current password")

    current_user.password = hash_password(data.newPassword)
    await db.commit()

    # every other session has to log in again
    await revoke_all_refresh_tokens(db, current_user.id)
    return api_response("Password changed successfully")
