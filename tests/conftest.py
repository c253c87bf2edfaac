"""Pytest configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Settings are read at import time, so CONFIG has to be set first
os.environ.setdefault("CONFIG", str(Path(__file__).parent / "resources" / "test.yaml"))

import jwt  # noqa: E402
import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from homebase_backend.config import settings  # noqa: E402
from homebase_backend.database import Base, get_db  # noqa: E402
from homebase_backend.modules.auth import models as auth_models  # noqa: E402, F401
from homebase_backend.modules.auth.schemas import CallerIdentity  # noqa: E402
from homebase_backend.modules.property_management import (  # noqa: E402, F401
    models as property_models,
)
from homebase_backend.modules.tenant_management import (  # noqa: E402, F401
    models as tenant_models,
)


@pytest.fixture
async def engine(tmp_path):
    """Fresh SQLite database per test."""
    test_engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'homebase.db'}", future=True
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_token():
    """Build identity tokens the way the identity provider would."""

    def _make_token(
        sub: str,
        email: str | None = None,
        name: str | None = None,
        expires_in: timedelta = timedelta(hours=1),
        secret: str | None = None,
    ) -> str:
        payload = {
            "sub": sub,
            "aud": settings.identity_jwt_audience,
            "exp": datetime.now(timezone.utc) + expires_in,
        }
        if email:
            payload["email"] = email
        if name:
            payload["user_metadata"] = {"name": name}
        return jwt.encode(
            payload,
            secret or settings.identity_jwt_secret,
            algorithm=settings.identity_jwt_algorithm,
        )

    return _make_token


@pytest.fixture
def auth_headers(make_token):
    def _auth_headers(sub: str, email: str | None = None, name: str | None = None):
        return {"Authorization": f"Bearer {make_token(sub, email=email, name=name)}"}

    return _auth_headers


@pytest.fixture
def landlord() -> CallerIdentity:
    return CallerIdentity(
        external_id="landlord-001", email="lana@example.com", name="Lana Landlord"
    )


@pytest.fixture
def tenant() -> CallerIdentity:
    return CallerIdentity(external_id="tenant-001", email="toby@example.com")


@pytest.fixture
async def client(session_factory):
    """HTTP client against the app with the test database behind get_db."""
    from homebase_backend.main import app

    async def _get_test_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
    app.dependency_overrides.clear()
