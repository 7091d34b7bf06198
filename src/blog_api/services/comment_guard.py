"""
blog_api.services.comment_guard

Comment ownership check shared by every comment operation addressed by
`(post_id, comment_id)`.

Responsibilities:
- Load the post, then the comment, and require `comment.post_id == post_id`.
"""

from __future__ import annotations

from blog_api.db.models import Comment
from blog_api.db.repositories.comments import CommentRepo
from blog_api.db.repositories.posts import PostRepo
from blog_api.errors import OwnershipMismatch, ResourceNotFound
from blog_api.observability.logging import get_logger

log = get_logger(__name__)


async def ensure_belongs(
    *,
    posts: PostRepo,
    comments: CommentRepo,
    post_id: int,
    comment_id: int,
) -> Comment:
    # Post first: a missing post is reported even when the comment is missing too.
    post = await posts.get(post_id)
    if post is None:
        raise ResourceNotFound("post", post_id)

    comment = await comments.get(comment_id)
    if comment is None:
        raise ResourceNotFound("comment", comment_id)

    if comment.post_id != post.id:
        log.warning(
            "comment_post_mismatch",
            post_id=post_id,
            comment_id=comment_id,
            owner_post_id=comment.post_id,
        )
        raise OwnershipMismatch()

    return comment
