from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_video as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.model.video import VideoModel
from vidtube.service.auth import get_current_user
from vidtube.service.ownership import get_owned
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


@router.patch("/toggle/publish/{videoId}")
async def toggle_publish_status(
        videoId: PathId,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    video = await get_owned(db, VideoModel, videoId, current_user.id, "Video")

    video.is_published = not video.is_published
    await db.commit()

    return api_response(
        "Video published" if video.is_published else "Video unpublished",
        {"videoId": video.id, "isPublished": video.is_published},
    )
