from fastapi import Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from vidtube.api.router_base import router_health as router
from vidtube.db.dependency import get_db
from vidtube.utility.logger import get_logger

logger = get_logger("health")


@router.get(
    "/alive",
    summary="Health Check",
    description="Return data about whether server and database are live",
    responses={
        200: {
            "description": "When server is alive",
            "content": {
                "application/json": {
                    "example": {"message": "yes", "database": True}
                }
            }
        }
    }
)
async def healthcheck(db: AsyncSession = Depends(get_db)):
    try:
        await db.execute(text("SELECT 1"))
        database = True
    except SQLAlchemyError as e:
        logger.warning("Database ping failed: %s", e)
        database = False
    return {"message": "yes", "database": database}
