from contextlib import asynccontextmanager
from fastapi import FastAPI
from vidtube.config.environments import DB_AUTO_CREATE, ENVIRONMENT
from vidtube.db.database import Base, engine
from vidtube.utility.logger import get_logger

# every model has to be imported before create_all sees its table
from vidtube.model import user, video, like, comment, subscription, playlist, notification, report  # noqa: F401

logger = get_logger("app")


@asynccontextmanager
async def lifespan(application: FastAPI):
    logger.info("App starting up (%s)...", ENVIRONMENT)

    if DB_AUTO_CREATE:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ensured")

    yield

    await engine.dispose()
    logger.info("App shutting down...")
