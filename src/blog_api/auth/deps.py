"""
blog_api.auth.deps

Authorization gate for mutation endpoints.

Responsibilities:
- Convert a bearer token into a verified `Subject`.
- Enforce the required role before a request reaches a service.
- Provide a reusable FastAPI dependency factory (`require_roles`).
"""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from blog_api.auth.credentials import CredentialService
from blog_api.auth.models import Subject
from blog_api.errors import CredentialError, CredentialMissing, ForbiddenRole
from blog_api.observability.logging import get_logger

log = get_logger(__name__)

_bearer = HTTPBearer(auto_error=False)


def credential_service_from_app(request: Request) -> CredentialService:
    # Built once on app startup in `blog_api.api.app.create_app`.
    return request.app.state.credentials  # type: ignore[attr-defined]


def authorize(
    *,
    token: str | None,
    required: frozenset[str],
    credentials: CredentialService,
) -> Subject:
    """
    unauthorized -> authorized only when a token is present, verifies, and the
    subject holds every required role. Any other path raises.
    """

    if token is None:
        raise CredentialMissing("Missing bearer token")
    subject = credentials.verify(token)
    if not all(subject.has_role(role) for role in required):
        raise ForbiddenRole("Access is denied: insufficient role")
    return subject


def require_roles(*required: str):
    required_set = frozenset(required)

    def _dep(
        creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
        credentials: CredentialService = Depends(credential_service_from_app),
    ) -> Subject:
        token = creds.credentials if creds is not None else None
        try:
            subject = authorize(token=token, required=required_set, credentials=credentials)
        except CredentialError as e:
            # Kind only; the token itself is never logged.
            log.warning("authorization_denied", kind=e.kind.value, required=sorted(required_set))
            raise
        log.debug("authorization_granted", subject=subject.name)
        return subject

    return _dep


# --- Module Notes -----------------------------------------------------------
# Read endpoints never depend on this module; every create/update/delete route for
# posts and categories declares `require_roles(Role.admin)`.
