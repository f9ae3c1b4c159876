import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from gridfs.errors import NoFile
from mongomock_motor import AsyncMongoMockClient

from app.database import get_db, get_fs_bucket
from app.main import app


class FakeGridOut:
    def __init__(self, filename, contents, metadata):
        self.filename = filename
        self.metadata = metadata
        self._contents = contents

    async def read(self):
        return self._contents


class FakeBucket:
    """Minimal stand-in for AsyncIOMotorGridFSBucket."""

    def __init__(self):
        self.files = {}

    async def upload_from_stream(self, filename, source, metadata=None):
        file_id = ObjectId()
        self.files[file_id] = FakeGridOut(filename, source.read(), metadata)
        return file_id

    async def open_download_stream(self, file_id):
        if file_id not in self.files:
            raise NoFile(f"no file with id {file_id}")
        return self.files[file_id]

    async def delete(self, file_id):
        if file_id not in self.files:
            raise NoFile(f"no file with id {file_id}")
        del self.files[file_id]


class RecordingMailer:
    def __init__(self, succeed=True):
        self.succeed = succeed
        self.sent = []

    async def __call__(self, email, token, name="User"):
        self.sent.append({"email": email, "token": token, "name": name})
        return self.succeed


@pytest.fixture
def db():
    return AsyncMongoMockClient()["hr_portal_test"]


@pytest.fixture
def fs_bucket():
    return FakeBucket()


@pytest.fixture
def mailer(monkeypatch):
    recorder = RecordingMailer()
    monkeypatch.setattr("app.services.users.send_set_password_email", recorder)
    return recorder


@pytest.fixture
def client(db, fs_bucket):
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_fs_bucket] = lambda: fs_bucket
    yield TestClient(app)
    app.dependency_overrides.clear()
