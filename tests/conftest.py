"""
tests.conftest

Shared fixtures: test settings, a controllable clock, an in-memory database
session, and an in-process HTTP client.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from datetime import UTC, datetime, timedelta

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.api.app import create_app
from blog_api.auth.codec import CodecConfig
from blog_api.auth.credentials import CredentialService
from blog_api.auth.models import Role, Subject
from blog_api.db.session import create_engine, create_sessionmaker, init_db
from blog_api.settings import Settings

TEST_SECRET = "test-signing-key-0123456789abcdef-xyz"


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime.now(tz=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture
def settings() -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        database_url="sqlite+aiosqlite://",
        jwt_secret=TEST_SECRET,
        jwt_ttl_seconds=3600,
        admin_username="admin",
        admin_password="s3cret-password",
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def codec_cfg(settings: Settings) -> CodecConfig:
    return CodecConfig(
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
        secret=settings.jwt_secret,
    )


@pytest.fixture
def credentials(settings: Settings, clock: FakeClock) -> CredentialService:
    return CredentialService.from_settings(settings, clock=clock)


@pytest.fixture
def admin() -> Subject:
    return Subject(name="admin", roles=frozenset({Role.admin.value}))


@pytest.fixture
def reader() -> Subject:
    return Subject(name="reader", roles=frozenset({Role.user.value}))


@pytest_asyncio.fixture
async def session(settings: Settings) -> AsyncIterator[AsyncSession]:
    engine = create_engine(settings)
    await init_db(engine)
    factory = create_sessionmaker(engine)
    try:
        async with factory() as s:
            yield s
    finally:
        await engine.dispose()


@pytest.fixture
def app(settings: Settings, clock: FakeClock) -> FastAPI:
    return create_app(settings=settings, clock=clock)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    # httpx ASGITransport does not run lifespan events; enter the lifespan explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
            yield c
