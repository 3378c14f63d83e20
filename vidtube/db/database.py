from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import NullPool
from vidtube.config.environments import DATABASE_URL

# sync driver URLs are accepted from .env, the app itself only talks asyncpg
ASYNC_DB_URL = DATABASE_URL.replace("postgresql+psycopg2", "postgresql+asyncpg")

connect_args = {}
if ASYNC_DB_URL.startswith("postgresql+asyncpg"):
    # pgbouncer in transaction mode does not support prepared statements
    connect_args = {
        "statement_cache_size": 0,
        "prepared_statement_cache_size": 0,
    }

engine = create_async_engine(
    ASYNC_DB_URL,
    poolclass=NullPool,
    connect_args=connect_args
)

AsyncSessionLocal = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

Base = declarative_base()
