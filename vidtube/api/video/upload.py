from typing import Annotated
from fastapi import UploadFile, File, Form, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_video as router
from vidtube.api.video.form import Title, Description, VideoFormat, Duration, Category, Tags
from vidtube.config.environments import STORAGE_BUCKET_VIDEOS, STORAGE_BUCKET_THUMBNAILS
from vidtube.db.dependency import get_db
from vidtube.model.notification import NotificationType
from vidtube.model.subscription import SubscriptionModel
from vidtube.model.user import UserModel
from vidtube.model.video import VideoModel, VideoPrivacy
from vidtube.service.auth import get_current_user
from vidtube.service.engagement import compose_video
from vidtube.service.notification import notify
from vidtube.utility.logger import get_logger
from vidtube.utility.response import api_response
from vidtube.utility.storage import store_upload

logger = get_logger("video")

# a new upload pings at most this many subscribers
UPLOAD_NOTIFICATION_LIMIT = 100


@router.post("/upload")
async def upload_video(
        title: Annotated[Title, Form()],
        videoformat: Annotated[VideoFormat, Form()],
        duration: Annotated[Duration, Form()],
        video: Annotated[UploadFile, File()],
        description: Annotated[Description, Form()] = "",
        category: Annotated[Category, Form()] = "general",
        tags: Annotated[Tags | None, Form()] = None,
        privacy: Annotated[VideoPrivacy, Form()] = VideoPrivacy.PUBLIC,
        isPublished: Annotated[bool, Form()] = True,
        thumbnail: UploadFile | None = File(None),
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    values = {
        "title": title,
        "description": description,
        "videoformat": videoformat,
        "duration": duration,
        "category": category,
        "tags": tags or [],
        "privacy": privacy,
        "is_published": isPublished,
    }

    media = await store_upload(video, STORAGE_BUCKET_VIDEOS)
    thumbnail_url = ""
    if thumbnail and thumbnail.filename:
        thumbnail_url = (await store_upload(thumbnail, STORAGE_BUCKET_THUMBNAILS)).url

    new_video = VideoModel(owner_id=current_user.id, url=media.url, thumbnail_url=thumbnail_url, **values)
    db.add(new_video)
    await db.commit()
    await db.refresh(new_video)
    logger.info("Video %s uploaded by user %s", new_video.id, current_user.id)

    if new_video.is_published and new_video.privacy == VideoPrivacy.PUBLIC:
        result = await db.execute(
            select(SubscriptionModel.subscriber_id)
            .where(SubscriptionModel.channel_id == current_user.id)
            .limit(UPLOAD_NOTIFICATION_LIMIT)
        )
        for subscriber_id in result.scalars().all():
            await notify(
                subscriber_id,
                current_user.id,
                NotificationType.VIDEO_UPLOAD,
                "New video",
                f"{current_user.username} uploaded: {new_video.title}",
                related_video_id=new_video.id,
            )

    return api_response(
        "Video uploaded successfully",
        await compose_video(db, new_video, current_user.id),
        status.HTTP_201_CREATED,
    )
