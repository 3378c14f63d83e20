from typing import Annotated
from fastapi import Depends, Path
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_user as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.utility.fields import Username
from vidtube.utility.response import api_response


@router.get("/check-username/{username}")
async def check_username(username: Annotated[Username, Path()], db: AsyncSession = Depends(get_db)):
    taken = await db.scalar(select(UserModel.id).where(UserModel.username == username))
    return api_response(
        "Username availability checked",
        {"username": username, "available": taken is None},
    )
