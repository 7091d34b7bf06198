"""
tests.test_comment_guard

Comment ownership guard: order of checks and the post/comment invariant.
"""

from __future__ import annotations

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from blog_api.db.repositories.categories import CategoryRepo
from blog_api.db.repositories.comments import CommentRepo
from blog_api.db.repositories.posts import PostRepo
from blog_api.errors import OwnershipMismatch, ResourceNotFound
from blog_api.services.comment_guard import ensure_belongs


async def _post(session: AsyncSession, title: str):
    category = await CategoryRepo(session).add(name="general", description=None)
    return await PostRepo(session).add(
        title=title,
        description="a description long enough",
        content="body",
        category_id=category.id,
    )


async def _guard(session: AsyncSession, post_id: int, comment_id: int):
    return await ensure_belongs(
        posts=PostRepo(session),
        comments=CommentRepo(session),
        post_id=post_id,
        comment_id=comment_id,
    )


@pytest.mark.asyncio
async def test_missing_post_reported_even_if_comment_missing(session: AsyncSession) -> None:
    with pytest.raises(ResourceNotFound) as exc_info:
        await _guard(session, 41, 42)
    assert exc_info.value.kind == "post"
    assert exc_info.value.resource_id == 41


@pytest.mark.asyncio
async def test_missing_comment(session: AsyncSession) -> None:
    post = await _post(session, "first")
    with pytest.raises(ResourceNotFound) as exc_info:
        await _guard(session, post.id, 99)
    assert exc_info.value.kind == "comment"
    assert exc_info.value.resource_id == 99
    assert exc_info.value.http_status == 404


@pytest.mark.asyncio
async def test_comment_of_other_post_is_rejected(session: AsyncSession) -> None:
    p1 = await _post(session, "first")
    p2 = await _post(session, "second")
    c1 = await CommentRepo(session).add(post=p1, name="n", email="n@example.com", body="x" * 10)

    with pytest.raises(OwnershipMismatch) as exc_info:
        await _guard(session, p2.id, c1.id)
    assert exc_info.value.http_status == 400
    assert exc_info.value.message == "Comment does not belong to post"


@pytest.mark.asyncio
async def test_matching_pair_returns_comment_unchanged(session: AsyncSession) -> None:
    post = await _post(session, "first")
    comment = await CommentRepo(session).add(
        post=post, name="n", email="n@example.com", body="hello there"
    )

    found = await _guard(session, post.id, comment.id)

    assert found is comment
    assert (found.name, found.email, found.body, found.post_id) == (
        "n",
        "n@example.com",
        "hello there",
        post.id,
    )
