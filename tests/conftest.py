import os
import tempfile
from pathlib import Path

# Configure before anything imports app.config (settings are cached per process)
_tmp_dir = Path(tempfile.mkdtemp(prefix="bookit-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_tmp_dir / 'test.db'}"
os.environ["JWT_SECRET_KEY"] = "test-signing-secret"
os.environ["APP_ENV"] = "test"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["S3_BUCKET_NAME"] = "test-bucket"

import pytest
from fastapi.testclient import TestClient

from app.database import Base, SessionLocal, engine
from app.main import app
from app.services.uploads import UploadGateway, get_upload_gateway
from tests.helpers import FakeS3Client


@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


@pytest.fixture
def make_client():
    """Each client keeps its own cookie jar, i.e. its own logged-in identity."""
    return lambda: TestClient(app)


@pytest.fixture
def fake_s3():
    fake = FakeS3Client()
    app.dependency_overrides[get_upload_gateway] = lambda: UploadGateway(fake, "test-bucket")
    yield fake
    app.dependency_overrides.pop(get_upload_gateway, None)