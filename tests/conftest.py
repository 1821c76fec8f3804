# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from typing import Any

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from threadboard.api.dependencies import get_storage
from threadboard.core.security import create_access_token
from threadboard.db.session import Base
from threadboard.main import app as fastapi_app
from threadboard.repositories import MemoryStorage, SqlStorage, Storage
from threadboard.services import CommentService, PostService, UserService

TEST_DB_URL = "sqlite://"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Storage commits, so every test has to wipe the tables it touched.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(params=["memory", "sql"])
def storage(request: pytest.FixtureRequest) -> Storage:
    """Run the test once against each storage backend."""
    if request.param == "memory":
        return MemoryStorage()
    return SqlStorage(request.getfixturevalue("db_session"))


@pytest.fixture()
def user_service(storage: Storage) -> UserService:
    return UserService(storage)


@pytest.fixture()
def post_service(storage: Storage) -> PostService:
    return PostService(storage)


@pytest.fixture()
def comment_service(storage: Storage) -> CommentService:
    return CommentService(storage)


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_storage_dependency(app: FastAPI, request: pytest.FixtureRequest) -> Iterator[None]:
    if "storage" not in request.fixturenames:
        yield
        return

    storage = request.getfixturevalue("storage")

    def _get_storage_override() -> Generator[Storage, None, None]:
        yield storage

    app.dependency_overrides[get_storage] = _get_storage_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(get_storage, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


@pytest.fixture()
def graphql(client: TestClient) -> Callable[..., dict[str, Any]]:
    """Return a helper that posts a GraphQL document and returns the JSON body."""

    def _execute(
        query: str,
        variables: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> dict[str, Any]:
        response = client.post(
            "/graphql",
            json={"query": query, "variables": variables or {}},
            headers=headers or {},
        )
        return response.json()

    return _execute


@pytest.fixture()
def test_user(user_service: UserService) -> Any:
    """Create and return a registered user with password ``password1``."""
    return user_service.register("alice", "password1")


@pytest.fixture()
def other_user(user_service: UserService) -> Any:
    return user_service.register("bob", "password2")


@pytest.fixture()
def auth_headers(test_user: Any) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return {"Authorization": f"Bearer {create_access_token(test_user.id)}"}


@pytest.fixture()
def other_auth_headers(other_user: Any) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(other_user.id)}"}


@pytest.fixture()
def test_post(post_service: PostService, test_user: Any) -> Any:
    return post_service.create_post("Hello, world", test_user.id, commentable=True)


@pytest.fixture()
def locked_post(post_service: PostService, test_user: Any) -> Any:
    return post_service.create_post("No comments please", test_user.id, commentable=False)
