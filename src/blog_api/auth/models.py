"""
blog_api.auth.models

Auth domain models.

Responsibilities:
- Define the authenticated identity type (`Subject`) carried inside a credential.
- Define the role names the gate understands.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Role(enum.StrEnum):
    admin = "ADMIN"
    user = "USER"


@dataclass(frozen=True, slots=True)
class Subject:
    """
    Authenticated principal. Roles are whatever was embedded at issuance;
    they are never re-derived from another source while the credential lives.
    """

    name: str
    roles: frozenset[str]

    def has_role(self, role: str) -> bool:
        return role in self.roles

    @property
    def is_admin(self) -> bool:
        return Role.admin in self.roles


# --- Module Notes -----------------------------------------------------------
# Subjects are never persisted; they exist only as credential payloads.
