"""Shared pytest fixtures: in-memory database, temporary upload dir, logged-in clients."""

import os
import tempfile

# Settings are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="imugossip-uploads-")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import app.models  # noqa: F401
from app.api.deps import get_db
from app.config import settings
from app.crud import crud_user
from app.database import Base
from app.main import app as fastapi_app
from app.schemas.user import UserCreate

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

PASSWORD = "Sifre1234!"

# Smallest byte strings that pass the magic-bytes check
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 64


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def upload_dir(tmp_path, monkeypatch):
    """Every test writes images into its own directory."""
    directory = tmp_path / "uploads"
    directory.mkdir()
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(directory))
    return directory


@pytest.fixture()
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def make_user(db):
    def _make_user(username: str, is_admin: bool = False):
        user_in = UserCreate(username=username, email=f"{username}@imu.edu.tr", password=PASSWORD)
        return crud_user.create_user(db, user_in=user_in, is_admin=is_admin)
    return _make_user


@pytest.fixture()
def make_client(db):
    """Build a TestClient, optionally logged in as `user`."""
    fastapi_app.dependency_overrides[get_db] = override_get_db

    def _make_client(user=None):
        client = TestClient(fastapi_app, follow_redirects=False)
        if user is not None:
            response = client.post("/login", data={"email": user.email, "password": PASSWORD})
            assert response.status_code == 303
        return client

    yield _make_client
    fastapi_app.dependency_overrides.clear()


@pytest.fixture()
def alice(make_user):
    return make_user("alice")


@pytest.fixture()
def bob(make_user):
    return make_user("bob")


@pytest.fixture()
def admin(make_user):
    return make_user("admin", is_admin=True)


@pytest.fixture()
def client(make_client):
    """Anonymous client."""
    return make_client()


@pytest.fixture()
def alice_client(make_client, alice):
    return make_client(alice)


@pytest.fixture()
def bob_client(make_client, bob):
    return make_client(bob)


@pytest.fixture()
def admin_client(make_client, admin):
    return make_client(admin)


@pytest.fixture()
def create_post(db):
    """Create a post over HTTP and return the stored record."""
    from app.crud import crud_post

    def _create_post(client, title="Başlık", body="İçerik", category="Teknoloji", image=None):
        files = {"image": image} if image else None
        response = client.post(
            "/posts",
            data={"title": title, "body": body, "category": category},
            files=files,
        )
        assert response.status_code == 303, response.text
        db.expire_all()
        return crud_post.get_all(db, limit=1)[0]

    return _create_post
