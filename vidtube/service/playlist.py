from typing import Annotated
from pydantic import StringConstraints
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.model.playlist import PlaylistModel, PlaylistVideoModel
from vidtube.service.engagement import load_users, load_videos, shape_owner, compose_videos
from vidtube.service.visibility import is_visible_to
from vidtube.utility.errors import NotFoundError, ForbiddenError

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500

PlaylistName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=NAME_MAX_LENGTH)]
PlaylistDescription = Annotated[str, StringConstraints(strip_whitespace=True, max_length=DESCRIPTION_MAX_LENGTH)]


def shape_playlist(playlist: PlaylistModel, owner: dict | None, videos_count: int = 0) -> dict:
    return {
        "id": playlist.id,
        "name": playlist.name,
        "description": playlist.description or "",
        "isPublic": bool(playlist.is_public),
        "owner": owner,
        "videosCount": int(videos_count or 0),
        "createdAt": playlist.created_at,
        "updatedAt": playlist.updated_at,
    }


async def count_entries(db: AsyncSession, playlist_ids) -> dict[int, int]:
    ids = list(set(playlist_ids))
    if not ids:
        return {}
    result = await db.execute(
        select(PlaylistVideoModel.playlist_id, func.count())
        .where(PlaylistVideoModel.playlist_id.in_(ids))
        .group_by(PlaylistVideoModel.playlist_id)
    )
    return {playlist_id: count for playlist_id, count in result.all()}


async def compose_playlists(db: AsyncSession, playlists: list[PlaylistModel]) -> list[dict]:
    owners = await load_users(db, [playlist.owner_id for playlist in playlists])
    counts = await count_entries(db, [playlist.id for playlist in playlists])
    return [
        shape_playlist(playlist, shape_owner(owners.get(playlist.owner_id)), counts.get(playlist.id, 0))
        for playlist in playlists
    ]


async def get_playlist_or_404(db: AsyncSession, playlist_id: int) -> PlaylistModel:
    playlist = (await db.execute(select(PlaylistModel).where(PlaylistModel.id == playlist_id))).scalar_one_or_none()
    if not playlist:
        raise NotFoundError("Playlist")
    return playlist


async def get_readable_playlist(db: AsyncSession, playlist_id: int, viewer_id: int | None) -> PlaylistModel:
    playlist = await get_playlist_or_404(db, playlist_id)
    if not playlist.is_public and playlist.owner_id != viewer_id:
        raise ForbiddenError("You do not have access to this playlist")
    return playlist


async def load_entries(db: AsyncSession, playlist_id: int) -> list[PlaylistVideoModel]:
    result = await db.execute(
        select(PlaylistVideoModel)
        .where(PlaylistVideoModel.playlist_id == playlist_id)
        .order_by(PlaylistVideoModel.position.asc(), PlaylistVideoModel.id.asc())
    )
    return list(result.scalars().all())


async def compose_playlist_detail(db: AsyncSession, playlist: PlaylistModel, viewer_id: int | None) -> dict:
    entries = await load_entries(db, playlist.id)
    videos = await load_videos(db, [entry.video_id for entry in entries])

    ordered = [
        videos[entry.video_id]
        for entry in entries
        if entry.video_id in videos and is_visible_to(videos[entry.video_id], viewer_id)
    ]
    [detail] = await compose_playlists(db, [playlist])
    detail["videos"] = await compose_videos(db, ordered, viewer_id)
    return detail


async def renumber_entries(db: AsyncSession, playlist_id: int):
    for position, entry in enumerate(await load_entries(db, playlist_id)):
        entry.position = position
