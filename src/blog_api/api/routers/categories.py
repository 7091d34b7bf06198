"""
blog_api.api.routers.categories

Category endpoints.

Responsibilities:
- Public reads (single, all).
- ADMIN-gated add/update/delete.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from starlette.status import HTTP_201_CREATED

from blog_api.api.deps import category_service
from blog_api.auth.deps import require_roles
from blog_api.auth.models import Role
from blog_api.schemas import CategoryDto, CategoryPayload, category_to_dto
from blog_api.services.categories import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])

_admin_only = [Depends(require_roles(Role.admin))]


@router.post(
    "",
    response_model=CategoryDto,
    status_code=HTTP_201_CREATED,
    dependencies=_admin_only,
)
async def add_category(
    body: CategoryPayload,
    svc: CategoryService = Depends(category_service),
) -> CategoryDto:
    return category_to_dto(await svc.add(body))


@router.get("", response_model=list[CategoryDto])
async def list_categories(svc: CategoryService = Depends(category_service)) -> list[CategoryDto]:
    return [category_to_dto(c) for c in await svc.list_all()]


@router.get("/{category_id}", response_model=CategoryDto)
async def get_category(
    category_id: int,
    svc: CategoryService = Depends(category_service),
) -> CategoryDto:
    return category_to_dto(await svc.get(category_id))


@router.put("/{category_id}", response_model=CategoryDto, dependencies=_admin_only)
async def update_category(
    category_id: int,
    body: CategoryPayload,
    svc: CategoryService = Depends(category_service),
) -> CategoryDto:
    return category_to_dto(await svc.update(category_id, body))


@router.delete("/{category_id}", dependencies=_admin_only)
async def delete_category(
    category_id: int,
    svc: CategoryService = Depends(category_service),
) -> dict[str, str]:
    await svc.delete(category_id)
    return {"message": "Category deleted successfully"}
