import os
import shutil
import tempfile
import uuid
from dataclasses import dataclass
from pathlib import Path
from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool
from supabase import create_client, Client
from vidtube.config.environments import SUPABASE_PROJECT_URL, SUPABASE_SERVICE_KEY
from vidtube.utility.errors import ApiError
from vidtube.utility.logger import get_logger

logger = get_logger("storage")

CHUNK_SIZE = 1024 * 1024

_client: Client | None = None


def get_storage_client() -> Client:
    global _client
    if _client is None:
        _client = create_client(SUPABASE_PROJECT_URL, SUPABASE_SERVICE_KEY)
    return _client


@dataclass(frozen=True)
class MediaUpload:
    url: str
    path: str


def upload_file_to_storage(local_path: str, filename: str, content_type: str, bucket: str) -> str:
    """
    Upload a file from local disk to Supabase Storage

    Blocking; run it through run_in_threadpool.

    Returns:
        str: Public URL of the uploaded file
    """
    storage = get_storage_client().storage.from_(bucket)
    with open(local_path, "rb") as f:
        storage.upload(
            path=filename,
            file=f.read(),
            file_options={
                "content-type": content_type,
                "upsert": "false"  # Don't overwrite existing files
            }
        )
    return storage.get_public_url(filename)


async def store_upload(file: UploadFile, bucket: str) -> MediaUpload:
    """
    Stream an incoming upload to a temporary directory, then push it to storage

    The object name is a fresh uuid with the original extension.

    Raises:
        ApiError: 500 when the storage upload fails
    """
    unique_filename = f"{uuid.uuid4()}{Path(file.filename or '').suffix}"

    temp_dir = tempfile.mkdtemp()
    temp_path = os.path.join(temp_dir, unique_filename)

    try:
        with open(temp_path, "wb") as buffer:
            while chunk := await file.read(CHUNK_SIZE):
                buffer.write(chunk)

        url = await run_in_threadpool(
            upload_file_to_storage,
            temp_path,
            unique_filename,
            file.content_type or "application/octet-stream",
            bucket,
        )
    except Exception as e:
        logger.error("Upload of %s to bucket %s failed: %s", unique_filename, bucket, e)
        raise ApiError(500, f"Failed to upload {file.filename or 'file'}") from e
    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)

    logger.info("Uploaded %s to bucket %s", unique_filename, bucket)
    return MediaUpload(url=url, path=unique_filename)


def object_name_from_url(file_path: str) -> str:
    if file_path.startswith("http"):
        return file_path.split("/")[-1].split("?")[0]
    return file_path


def _remove(file_path: str, bucket: str):
    get_storage_client().storage.from_(bucket).remove([object_name_from_url(file_path)])


async def delete_from_storage(file_path: str, bucket: str) -> bool:
    """Best effort: failures are logged and reported as False."""
    if not file_path:
        return False
    try:
        await run_in_threadpool(_remove, file_path, bucket)
        return True
    except Exception as e:
        logger.warning("Error deleting %s from bucket %s: %s", file_path, bucket, e)
        return False
