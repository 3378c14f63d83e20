import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_ACCESS_TOKEN_EXPIRE_TIME = 60 * 60 * 24  # 1 Day
DEFAULT_REFRESH_TOKEN_EXPIRE_TIME = 60 * 60 * 24 * 10  # 10 Days
DEFAULT_PORT = 8080
DEFAULT_ENVIRONMENT = "development"
DEFAULT_LOG_LEVEL = "INFO"

ACCESS_TOKEN_SECRET = os.getenv("ACCESS_TOKEN_SECRET")
REFRESH_TOKEN_SECRET = os.getenv("REFRESH_TOKEN_SECRET")
if not all([ACCESS_TOKEN_SECRET, REFRESH_TOKEN_SECRET]):
    raise RuntimeError("Token secret environment variable is missing! Set it in your .env file.")

ACCESS_TOKEN_EXPIRE_TIME = int(os.getenv("ACCESS_TOKEN_EXPIRE_TIME", DEFAULT_ACCESS_TOKEN_EXPIRE_TIME))
REFRESH_TOKEN_EXPIRE_TIME = int(os.getenv("REFRESH_TOKEN_EXPIRE_TIME", DEFAULT_REFRESH_TOKEN_EXPIRE_TIME))
PORT = int(os.getenv("PORT", DEFAULT_PORT))
ENVIRONMENT = os.getenv("ENVIRONMENT", DEFAULT_ENVIRONMENT)
IS_PRODUCTION = ENVIRONMENT == "production"
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")]
LOG_LEVEL = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL environment variable is missing! Set it in your .env file.")
DB_AUTO_CREATE = os.getenv("DB_AUTO_CREATE", "false" if IS_PRODUCTION else "true").lower() == "true"

SUPABASE_PROJECT_URL = os.getenv("SUPABASE_PROJECT_URL")
SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY")
if not all([SUPABASE_PROJECT_URL, SUPABASE_SERVICE_KEY]):
    raise RuntimeError("SUPABASE related environment variable is missing! Set it in your .env file.")

STORAGE_BUCKET_VIDEOS = os.getenv("STORAGE_BUCKET_VIDEOS", "videos")
STORAGE_BUCKET_THUMBNAILS = os.getenv("STORAGE_BUCKET_THUMBNAILS", "thumbnails")
STORAGE_BUCKET_AVATARS = os.getenv("STORAGE_BUCKET_AVATARS", "avatars")
STORAGE_BUCKET_COVERS = os.getenv("STORAGE_BUCKET_COVERS", "covers")

COOKIE_SECURE = False
COOKIE_SAMESITE = "lax"
if IS_PRODUCTION:
    COOKIE_SECURE = True
    COOKIE_SAMESITE = "none"
