from fastapi import Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_user as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.engagement import shape_user
from vidtube.service.user import ensure_identity_available
from vidtube.utility.errors import ValidationError
from vidtube.utility.fields import Bio, Email, FullName, Username
from vidtube.utility.response import api_response


class UpdateProfileRequest(BaseModel):
    fullName: FullName | None = None
    email: Email | None = None
    username: Username | None = None
    bio: Bio | None = None


@router.patch("/update-profile")
async def update_profile(
        data: UpdateProfileRequest,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    changes = data.model_dump(exclude_none=True)
    if not changes:
        raise ValidationError("At least one field is required to update the profile")

    await ensure_identity_available(db, data.email, data.username, user_id=current_user.id)

    if data.fullName is not None:
        current_user.full_name = data.fullName
    if data.bio is not None:
        current_user.bio = data.bio
    if data.email is not None:
        current_user.email = data.email
    if data.username is not None:
        current_user.username = data.username

    await db.commit()
    await db.refresh(current_user)
    return api_response("Profile updated successfully", shape_user(current_user))
