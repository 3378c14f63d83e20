from fastapi import APIRouter

API_PREFIX = "/api/v1"

router_health = APIRouter(prefix="/health", tags=["Health"])
router_user = APIRouter(prefix=f"{API_PREFIX}/users", tags=["User"])
router_video = APIRouter(prefix=f"{API_PREFIX}/videos", tags=["Video"])
router_comment = APIRouter(prefix=f"{API_PREFIX}/comments", tags=["Comment"])
router_like = APIRouter(prefix=f"{API_PREFIX}/likes", tags=["Like"])
router_playlist = APIRouter(prefix=f"{API_PREFIX}/playlists", tags=["Playlist"])
router_notification = APIRouter(prefix=f"{API_PREFIX}/notifications", tags=["Notification"])
router_report = APIRouter(prefix=f"{API_PREFIX}/reports", tags=["Report"])
