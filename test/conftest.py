import asyncio
import os
import tempfile
import pytest

TEST_DIR = tempfile.mkdtemp(prefix="vidtube-test-")

# configuration is read at import time, so it has to be in place before vidtube is imported
os.environ["ACCESS_TOKEN_SECRET"] = "test-access-secret"
os.environ["REFRESH_TOKEN_SECRET"] = "test-refresh-secret"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DIR}/vidtube.db"
os.environ["SUPABASE_PROJECT_URL"] = "https://storage.test"
os.environ["SUPABASE_SERVICE_KEY"] = "test-service-key"
os.environ["ENVIRONMENT"] = "test"
os.environ["DB_AUTO_CREATE"] = "false"

from fastapi.testclient import TestClient  # noqa: E402
from vidtube.application import application  # noqa: E402
from vidtube.db.database import Base, engine  # noqa: E402
from vidtube.utility import storage  # noqa: E402

PASSWORD = "password123"


class FakeBucket:
    def __init__(self, objects: dict, name: str):
        self.objects = objects
        self.name = name

    def upload(self, path, file, file_options=None):
        self.objects[(self.name, path)] = file
        return {"path": path}

    def get_public_url(self, path):
        return f"https://storage.test/storage/v1/object/public/{self.name}/{path}"

    def remove(self, paths):
        for path in paths:
            self.objects.pop((self.name, path), None)
        return []


class FakeStorage:
    def __init__(self):
        self.objects = {}
        self.fail_removals = False

    def from_(self, bucket):
        if self.fail_removals:
            return FailingBucket(self.objects, bucket)
        return FakeBucket(self.objects, bucket)


class FailingBucket(FakeBucket):
    def remove(self, paths):
        raise RuntimeError("storage unavailable")


class FakeSupabase:
    def __init__(self):
        self.storage = FakeStorage()


async def _reset_database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture(autouse=True)
def fake_supabase(monkeypatch):
    fake = FakeSupabase()
    monkeypatch.setattr(storage, "_client", fake)
    return fake


@pytest.fixture
def client():
    asyncio.run(_reset_database())
    with TestClient(application) as test_client:
        yield test_client


def auth(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def register_user(client, username: str, email: str | None = None, password: str = PASSWORD, cover: bool = False):
    files = {"avatar": ("avatar.png", b"avatar-bytes", "image/png")}
    if cover:
        files["coverImage"] = ("cover.png", b"cover-bytes", "image/png")
    return client.post(
        "/api/v1/users/register",
        data={
            "fullName": f"{username.title()} Tester",
            "username": username,
            "email": email or f"{username}@example.com",
            "password": password,
        },
        files=files,
    )


def login_user(client, username: str, password: str = PASSWORD) -> dict:
    response = client.post("/api/v1/users/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    # keep requests explicit: identity only travels in the Authorization header
    client.cookies.clear()
    return response.json()["data"]


def create_user(client, username: str) -> tuple[int, str]:
    """Register and log in; returns (user id, access token)."""
    response = register_user(client, username)
    assert response.status_code == 201, response.text
    data = login_user(client, username)
    return data["user"]["id"], data["accessToken"]


def upload_video(client, token: str, **fields) -> dict:
    form = {
        "title": "A video",
        "description": "Something to watch",
        "videoformat": "mp4",
        "duration": "42.5",
    }
    form.update({name: str(value) for name, value in fields.items()})
    response = client.post(
        "/api/v1/videos/upload",
        data=form,
        files={
            "video": ("clip.mp4", b"video-bytes", "video/mp4"),
            "thumbnail": ("thumb.jpg", b"thumb-bytes", "image/jpeg"),
        },
        headers=auth(token),
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]
