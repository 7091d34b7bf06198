"""
blog_api.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for settings, DB sessions, and services.
- Encapsulate app.state access patterns (settings/engine/sessionmaker).
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blog_api.auth.credentials import CredentialService
from blog_api.auth.deps import credential_service_from_app
from blog_api.services.categories import CategoryService
from blog_api.services.comments import CommentService
from blog_api.services.login import LoginService
from blog_api.services.posts import PostService
from blog_api.settings import Settings


def settings_dep(request: Request) -> Settings:
    # The app is built with an explicit Settings instance (see `create_app`).
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped DB session. Commit is managed explicitly by the service layer.
    async with session_factory() as session:
        yield session


def post_service(session: AsyncSession = Depends(db_session)) -> PostService:
    return PostService(session=session)


def comment_service(session: AsyncSession = Depends(db_session)) -> CommentService:
    return CommentService(session=session)


def category_service(session: AsyncSession = Depends(db_session)) -> CategoryService:
    return CategoryService(session=session)


def login_service(
    settings: Settings = Depends(settings_dep),
    credentials: CredentialService = Depends(credential_service_from_app),
) -> LoginService:
    return LoginService(settings=settings, credentials=credentials)
