from typing import Annotated
from fastapi import UploadFile, File, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_user as router
from vidtube.config.environments import STORAGE_BUCKET_COVERS
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.engagement import shape_user
from vidtube.utility.response import api_response
from vidtube.utility.storage import store_upload, delete_from_storage


@router.patch("/cover-image")
async def update_cover_image(
        coverImage: Annotated[UploadFile, File()],
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    uploaded = await store_upload(coverImage, STORAGE_BUCKET_COVERS)
    old_url = current_user.cover_url

    current_user.cover_url = uploaded.url
    await db.commit()
    await db.refresh(current_user)

    if old_url:
        await delete_from_storage(old_url, STORAGE_BUCKET_COVERS)

    return api_response("Cover image updated successfully", shape_user(current_user))
