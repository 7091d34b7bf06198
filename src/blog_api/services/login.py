"""
blog_api.services.login

Administrator login.

Responsibilities:
- Check submitted credentials against the configured administrator account.
- Issue a credential for the ADMIN subject on success.
"""

from __future__ import annotations

import hmac

from blog_api.auth.credentials import Credential, CredentialService
from blog_api.auth.models import Role, Subject
from blog_api.errors import AuthenticationFailed
from blog_api.observability.logging import get_logger
from blog_api.settings import Settings

log = get_logger(__name__)


class LoginService:
    def __init__(self, *, settings: Settings, credentials: CredentialService) -> None:
        self._settings = settings
        self._credentials = credentials

    def login(self, *, username: str, password: str) -> Credential:
        # Compare both fields in constant time; never short-circuit on the username.
        user_ok = hmac.compare_digest(username.encode(), self._settings.admin_username.encode())
        password_ok = hmac.compare_digest(
            password.encode(), self._settings.admin_password.encode()
        )
        if not (user_ok and password_ok):
            log.warning("login_failed", username=username)
            raise AuthenticationFailed("Invalid username or password")

        credential = self._credentials.issue(
            Subject(name=self._settings.admin_username, roles=frozenset({Role.admin.value}))
        )
        log.info("login_succeeded", subject=credential.subject.name)
        return credential
