from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_video as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.video import record_watch
from vidtube.utility.fields import PathId
from vidtube.utility.response import api_response


@router.post("/{videoId}/watch")
async def watch_video(
        videoId: PathId,
        current_user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    view_counted = await record_watch(db, videoId, current_user.id)
    return api_response(
        "Added to watch history",
        {"videoId": videoId, "viewCounted": view_counted},
    )
