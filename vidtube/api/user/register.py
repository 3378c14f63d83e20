from typing import Annotated
from fastapi import UploadFile, File, Form, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_user as router
from vidtube.config.environments import STORAGE_BUCKET_AVATARS, STORAGE_BUCKET_COVERS
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.user import ensure_identity_available
from vidtube.service.engagement import shape_user
from vidtube.utility.fields import Email, FullName, Password, Username
from vidtube.utility.logger import get_logger
from vidtube.utility.response import api_response
from vidtube.utility.security import hash_password
from vidtube.utility.storage import store_upload

logger = get_logger("user")


@router.post("/register")
async def register(
        fullName: Annotated[FullName, Form()],
        username: Annotated[Username, Form()],
        email: Annotated[Email, Form()],
        password: Annotated[Password, Form()],
        avatar: Annotated[UploadFile, File()],
        coverImage: UploadFile | None = File(None),
        db: AsyncSession = Depends(get_db)
):
    await ensure_identity_available(db, email, username)

    avatar_upload = await store_upload(avatar, STORAGE_BUCKET_AVATARS)
    cover_url = ""
    if coverImage and coverImage.filename:
        cover_url = (await store_upload(coverImage, STORAGE_BUCKET_COVERS)).url

    new_user = UserModel(
        full_name=fullName,
        username=username,
        email=email,
        password=hash_password(password),
        avatar_url=avatar_upload.url,
        cover_url=cover_url,
    )
    db.add(new_user)
    await db.commit()
    await db.refresh(new_user)

    logger.info("User %s registered", new_user.id)
    return api_response("User registered successfully", shape_user(new_user), status.HTTP_201_CREATED)
