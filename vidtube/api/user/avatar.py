from typing import Annotated
from fastapi import UploadFile, File, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_user as router
from vidtube.config.environments import STORAGE_BUCKET_AVATARS
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.engagement import shape_user
from vidtube.utility.response import api_response
from vidtube.utility.storage import store_upload, delete_from_storage


@router.patch("/avatar")
async def update_avatar(
        avatar: Annotated[UploadFile, File()],
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    uploaded = await store_upload(avatar, STORAGE_BUCKET_AVATARS)
    old_url = current_user.avatar_url

    current_user.avatar_url = uploaded.url
    await db.commit()
    await db.refresh(current_user)

    if old_url:
        await delete_from_storage(old_url, STORAGE_BUCKET_AVATARS)

    return api_response("Avatar updated successfully", shape_user(current_user))
