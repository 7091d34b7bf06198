"""
blog_api.schemas

Wire payloads (Pydantic) and explicit entity -> payload mapping.

Responsibilities:
- Define request/response models with camelCase wire names.
- Validate field shape (non-empty strings, length bounds, email syntax).
- Map ORM entities to payloads field by field.
- Project a post into its versioned representation.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel

from blog_api.db.models import Category, Comment, Post
from blog_api.db.paging import PagedResult
from blog_api.errors import UnsupportedVersion

# Constant tag list carried by version 2 of the post representation.
POST_V2_TAGS: tuple[str, ...] = ("Java", "Spring-Boot", "AWS")


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Auth -------------------------------------------------------------------


class LoginRequest(ApiModel):
    username_or_email: str = Field(min_length=1, max_length=256)
    password: str = Field(min_length=1, repr=False)


class TokenResponse(ApiModel):
    access_token: str
    token_type: str = "Bearer"


# --- Categories -------------------------------------------------------------


class CategoryPayload(ApiModel):
    name: str = Field(min_length=1, max_length=255)
    description: str | None = None


class CategoryDto(ApiModel):
    id: int
    name: str
    description: str | None = None


# --- Comments ---------------------------------------------------------------


class CommentPayload(ApiModel):
    """
    Body for create/update. Any post reference sent by the client is ignored;
    the parent post always comes from the request path.
    """

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    body: str = Field(min_length=10)


class CommentDto(ApiModel):
    id: int
    name: str
    email: str
    body: str


# --- Posts ------------------------------------------------------------------


class PostPayload(ApiModel):
    title: str = Field(min_length=2, max_length=255)
    description: str = Field(min_length=10, max_length=1024)
    content: str = Field(min_length=1)
    category_id: int


class PostDto(ApiModel):
    id: int
    title: str
    description: str
    content: str
    comments: list[CommentDto] = Field(default_factory=list)
    category_id: int


class PostDtoV2(PostDto):
    tags: list[str] = Field(default_factory=list)


class PostPage(ApiModel):
    content: list[PostDto]
    page_no: int
    page_size: int
    total_elements: int
    total_pages: int
    last: bool


# --- Mapping ----------------------------------------------------------------


def category_to_dto(category: Category) -> CategoryDto:
    return CategoryDto(id=category.id, name=category.name, description=category.description)


def comment_to_dto(comment: Comment) -> CommentDto:
    return CommentDto(id=comment.id, name=comment.name, email=comment.email, body=comment.body)


def post_to_dto(post: Post) -> PostDto:
    return PostDto(
        id=post.id,
        title=post.title,
        description=post.description,
        content=post.content,
        comments=[comment_to_dto(c) for c in post.comments],
        category_id=post.category_id,
    )


def post_page_to_response(page: PagedResult[Post]) -> PostPage:
    dtos = page.map(post_to_dto)
    return PostPage(
        content=dtos.content,
        page_no=dtos.page_number,
        page_size=dtos.page_size,
        total_elements=dtos.total_elements,
        total_pages=dtos.total_pages,
        last=dtos.is_last_page,
    )


def project_post(dto: PostDto, version: str | int = 1) -> PostDto:
    """
    Versioned read projection. Version 1 is the canonical post; version 2 adds
    the constant tag list. Pure: the input is not modified.
    """

    requested = str(version).strip()
    if requested == "1":
        return dto
    if requested == "2":
        return PostDtoV2(**dto.model_dump(), tags=list(POST_V2_TAGS))
    raise UnsupportedVersion(requested)
