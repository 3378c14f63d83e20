from typing import Annotated
from fastapi import Depends, Path
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_user as router
from vidtube.db.dependency import get_db
from vidtube.model.user import UserModel
from vidtube.utility.fields import Email
from vidtube.utility.response import api_response


@router.get("/check-email/{email}")
async def check_email(email: Annotated[Email, Path()], db: AsyncSession = Depends(get_db)):
    taken = await db.scalar(select(UserModel.id).where(UserModel.email == email))
    return api_response("Email availability checked", {"email": email, "available": taken is None})
