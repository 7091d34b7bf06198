"""
blog_api.api.routers.auth

Login endpoint.

Responsibilities:
- Exchange administrator credentials for a signed bearer token.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from blog_api.api.deps import login_service
from blog_api.schemas import LoginRequest, TokenResponse
from blog_api.services.login import LoginService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=TokenResponse)
async def login(
    body: LoginRequest,
    svc: LoginService = Depends(login_service),
) -> TokenResponse:
    credential = svc.login(username=body.username_or_email, password=body.password)
    return TokenResponse(access_token=credential.token, token_type=credential.token_type)
