from typing import Annotated
from fastapi import UploadFile, File, Form, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_video as router
from vidtube.api.video.form import Title, Description, Category, Tags
from vidtube.config.environments import STORAGE_BUCKET_THUMBNAILS
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.model.video import VideoModel, VideoPrivacy
from vidtube.service.auth import get_current_user
from vidtube.service.engagement import compose_video
from vidtube.service.ownership import get_owned
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response
from vidtube.utility.storage import store_upload, delete_from_storage


@router.patch("/{videoId}")
async def update_video(
        videoId: PathId,
        title: Annotated[Title | None, Form()] = None,
        description: Annotated[Description | None, Form()] = None,
        category: Annotated[Category | None, Form()] = None,
        tags: Annotated[Tags | None, Form()] = None,
        privacy: Annotated[VideoPrivacy | None, Form()] = None,
        thumbnail: UploadFile | None = File(None),
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    video = await get_owned(db, VideoModel, videoId, current_user.id, "Video")

    supplied = {
        "title": title,
        "description": description,
        "category": category,
        "tags": tags,
        "privacy": privacy,
    }
    changes = {name: value for name, value in supplied.items() if value is not None}

    old_thumbnail = None
    if thumbnail and thumbnail.filename:
        old_thumbnail = video.thumbnail_url
        changes["thumbnail_url"] = (await store_upload(thumbnail, STORAGE_BUCKET_THUMBNAILS)).url

    for name, value in changes.items():
        setattr(video, name, value)
    await db.commit()
    await db.refresh(video)

    if old_thumbnail:
        await delete_from_storage(old_thumbnail, STORAGE_BUCKET_THUMBNAILS)

    return api_response("Video updated successfully", await compose_video(db, video, current_user.id))
