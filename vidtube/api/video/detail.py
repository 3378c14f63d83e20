from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_video as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import get_optional_user
from vidtube.service.engagement import compose_video
from vidtube.service.visibility import get_visible_video
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


@router.get("/{videoId}")
async def get_video_detail(
        videoId: PathId,
        viewer: UserModel | None = Depends(get_optional_user),
        db: AsyncSession = Depends(get_db)
):
    viewer_id = viewer.id if viewer else None
    video = await get_visible_video(db, videoId, viewer_id)
    return api_response("Video fetched successfully", await compose_video(db, video, viewer_id))
