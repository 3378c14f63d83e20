from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_video as router
from vidtube.db.dependency import get_db
from vidtube.service.search import suggest_titles
from vidtube.utility.response import api_response


@router.get("/suggestions")
async def get_suggestions(query: str | None = None, db: AsyncSession = Depends(get_db)):
    query = (query or "").strip()[:100]
    if not query:
        return api_response("Suggestions fetched successfully", [])
    return api_response("Suggestions fetched successfully", await suggest_titles(db, query))
