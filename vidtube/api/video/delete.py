from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_video as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.model.video import VideoModel
from vidtube.service.auth import get_current_user
from vidtube.service.ownership import get_owned
from vidtube.service.video import delete_video as delete_video_cascade
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


@router.delete("/{videoId}")
async def delete_video(
        videoId: PathId,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    video = await get_owned(db, VideoModel, videoId, current_user.id, "Video")
    outcome = await delete_video_cascade(db, video)

    return api_response(
        "Video deleted successfully",
        {"videoId": videoId, "cleanup": outcome.as_dict()},
    )
