from vidtube.api.router_base import (
    router_health,
    router_user,
    router_video,
    router_comment,
    router_like,
    router_playlist,
    router_notification,
    router_report,
)

# Importing an endpoint module registers its route on the shared router.
# Within an area, literal paths are imported before the /{id} ones so they match first.
from vidtube.api.health import healthcheck  # noqa: F401
from vidtube.api.user import (  # noqa: F401
    register, login, refresh_token, logout, check_username, check_email, profile,
    update_profile, avatar, cover_image, change_password, channel, toggle_subscription, watch_history,
)
from vidtube.api.video import (  # noqa: F401
    feed, search, suggestions, user_videos, upload, toggle_publish,
    detail as video_detail, update as video_update, delete as video_delete, watch,
)
from vidtube.api.comment import (  # noqa: F401
    add, video_comments, update as comment_update, delete as comment_delete,
)
from vidtube.api.like import toggle_video, toggle_comment, liked_videos  # noqa: F401
from vidtube.api.playlist import (  # noqa: F401
    create as playlist_create, user_playlists, detail as playlist_detail,
    update as playlist_update, delete as playlist_delete, add_video, remove_video,
)
from vidtube.api.notification import (  # noqa: F401
    inbox, delete_all, unread_count, read_all, create as notification_create,
    mark_read, delete as notification_delete,
)
from vidtube.api.report import (  # noqa: F401
    create as report_create, my_reports, all_reports, detail as report_detail,
    update as report_update, delete as report_delete,
)


def add_router(application):
    application.include_router(router_health)
    application.include_router(router_user)
    application.include_router(router_video)
    application.include_router(router_comment)
    application.include_router(router_like)
    application.include_router(router_playlist)
    application.include_router(router_notification)
    application.include_router(router_report)
