"""
blog_api.errors

Domain error hierarchy.

Responsibilities:
- Give every expected failure a stable code and an HTTP status.
- Keep credential failures classified by kind without echoing tokens or keys.
- Produce a uniform REST error envelope via `to_response()`.
"""

from __future__ import annotations

import enum
from typing import Any


class CredentialFailure(enum.StrEnum):
    # Verify failures (checked in this order by CredentialService.verify).
    empty = "EMPTY"
    malformed = "MALFORMED"
    unsupported = "UNSUPPORTED"
    expired = "EXPIRED"
    # Gate-only failures.
    missing_credential = "MISSING_CREDENTIAL"
    forbidden_role = "FORBIDDEN_ROLE"


class BlogApiError(Exception):
    """
    Base class for all expected, caller-recoverable failures.
    None of these are retried by the service.
    """

    code: str = "BLOG_API_ERROR"
    http_status: int = 400

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        return {"error": {"code": self.code, "message": self.message}}


# --- Credentials ------------------------------------------------------------


class CredentialError(BlogApiError):
    http_status = 401
    kind: CredentialFailure = CredentialFailure.malformed

    def __init__(self, message: str, *, kind: CredentialFailure | None = None) -> None:
        super().__init__(message)
        if kind is not None:
            self.kind = kind

    def to_response(self) -> dict[str, Any]:
        body = super().to_response()
        body["error"]["kind"] = self.kind.value
        return body


class CredentialMissing(CredentialError):
    code = "CREDENTIAL_MISSING"
    kind = CredentialFailure.missing_credential


class CredentialMalformed(CredentialError):
    code = "CREDENTIAL_MALFORMED"
    kind = CredentialFailure.malformed


class CredentialUnsupported(CredentialError):
    code = "CREDENTIAL_UNSUPPORTED"
    kind = CredentialFailure.unsupported


class CredentialExpired(CredentialError):
    code = "CREDENTIAL_EXPIRED"
    kind = CredentialFailure.expired


class ForbiddenRole(CredentialError):
    code = "FORBIDDEN_ROLE"
    http_status = 403
    kind = CredentialFailure.forbidden_role


class AuthenticationFailed(BlogApiError):
    code = "AUTHENTICATION_FAILED"
    http_status = 401


# --- Resources --------------------------------------------------------------


class ResourceNotFound(BlogApiError):
    code = "RESOURCE_NOT_FOUND"
    http_status = 404

    def __init__(self, kind: str, resource_id: Any, *, field: str = "id") -> None:
        super().__init__(f"{kind} not found with {field} : '{resource_id}'")
        self.kind = kind
        self.resource_id = resource_id
        self.field = field


class OwnershipMismatch(BlogApiError):
    code = "OWNERSHIP_MISMATCH"
    http_status = 400

    def __init__(self, message: str = "Comment does not belong to post") -> None:
        super().__init__(message)


class InvalidSortField(BlogApiError):
    code = "INVALID_SORT_FIELD"
    http_status = 400

    def __init__(self, field: str) -> None:
        super().__init__(f"Cannot sort by unknown field '{field}'")
        self.field = field


class InvalidPageRequest(BlogApiError):
    code = "INVALID_PAGE_REQUEST"
    http_status = 400


class UnsupportedVersion(BlogApiError):
    code = "UNSUPPORTED_VERSION"
    http_status = 400

    def __init__(self, version: str) -> None:
        super().__init__(f"Unsupported representation version '{version}'")
        self.version = version


# --- Module Notes -----------------------------------------------------------
# HTTP mapping lives in `api.error_handlers`; services and the guard raise these
# types without importing FastAPI.
