import math
from datetime import datetime
from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.model.like import LikeTarget
from vidtube.model.video import VideoModel
from vidtube.service.engagement import count_likes, compose_videos
from vidtube.service.visibility import listed_video_conditions
from vidtube.utility.pagination import PageParams, Page, paginate_list
from vidtube.utility.time import utc_now

TITLE_MATCH_SCORE = 10
DESCRIPTION_MATCH_SCORE = 3
RECENCY_WINDOW_DAYS = 30


def relevance_score(
        title: str,
        description: str,
        query: str,
        views: int,
        likes: int,
        created_at: datetime,
        now: datetime,
) -> float:
    """
    Text match plus popularity and recency boosts.

    Each boost is capped at 1, so the boosts together stay below the gap
    between a title match and a description match.
    """
    needle = query.lower()
    score = 0.0
    if needle in (title or "").lower():
        score += TITLE_MATCH_SCORE
    if needle in (description or "").lower():
        score += DESCRIPTION_MATCH_SCORE

    score += 0.5 * min(math.log10(max(views, 0) + 1), 2)
    score += 0.5 * min(math.log10(max(likes, 0) + 1), 2)

    age_days = (now - created_at).total_seconds() / 86400
    score += max(0.0, 1 - age_days / RECENCY_WINDOW_DAYS)
    return score


def rank_videos(videos: list[VideoModel], query: str, likes: dict[int, int], now: datetime) -> list[VideoModel]:
    scored = [
        (relevance_score(v.title, v.description, query, v.views or 0, likes.get(v.id, 0), v.created_at, now), v)
        for v in videos
    ]
    scored.sort(key=lambda pair: (-pair[0], -pair[1].created_at.timestamp(), -pair[1].id))
    return [video for _, video in scored]


async def search_videos(db: AsyncSession, query: str, params: PageParams, viewer_id: int | None = None) -> Page:
    result = await db.execute(
        select(VideoModel).where(
            *listed_video_conditions(),
            or_(
                VideoModel.title.icontains(query, autoescape=True),
                VideoModel.description.icontains(query, autoescape=True),
            ),
        )
    )
    candidates = list(result.scalars().all())

    likes = await count_likes(db, LikeTarget.VIDEO, [video.id for video in candidates])
    ranked = rank_videos(candidates, query, likes, utc_now())

    page_videos, total = paginate_list(ranked, params)
    return Page(params, total, await compose_videos(db, page_videos, viewer_id))


async def suggest_titles(db: AsyncSession, query: str, limit: int = 10) -> list[str]:
    result = await db.execute(
        select(VideoModel.title)
        .where(*listed_video_conditions(), VideoModel.title.icontains(query, autoescape=True))
        .order_by(VideoModel.views.desc(), VideoModel.id.desc())
    )
    titles = []
    for title in result.scalars().all():
        if title not in titles:
            titles.append(title)
        if len(titles) == limit:
            break
    return titles
