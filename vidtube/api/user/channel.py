from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_user as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import get_optional_user
from vidtube.service.user import channel_profile
from vidtube.utility.response import api_response


@router.get("/c/{username}")
async def get_channel_profile(
        username: str,
        viewer: UserModel | None = Depends(get_optional_user),
        db: AsyncSession = Depends(get_db)
):
    profile = await channel_profile(db, username.strip().lower(), viewer.id if viewer else None)
    return api_response("Channel profile fetched successfully", profile)
