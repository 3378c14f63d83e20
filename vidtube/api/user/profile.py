from fastapi import Depends
from vidtube.api.router_base import router_user as router
from vidtube.model.user import UserModel
from vidtube.service.auth import get_current_user
from vidtube.service.engagement import shape_user
from vidtube.utility.response import api_response


@router.get("/profile")
async def get_profile(current_user: UserModel = Depends(get_current_user)):
    return api_response("User profile fetched successfully", shape_user(current_user))
