"""
blog_api.auth.credentials

Credential issuance and verification.

Responsibilities:
- Issue time-bound credentials for an authenticated Subject.
- Verify presented tokens and classify failures (empty, malformed,
  unsupported, expired), checked in that order.
- Expose the verified Subject / subject name.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

from blog_api.auth.codec import (
    CREDENTIAL_VERSION,
    Claims,
    CodecConfig,
    MalformedTokenError,
    UnsupportedAlgorithmError,
    decode,
    encode,
)
from blog_api.auth.models import Subject
from blog_api.errors import (
    CredentialExpired,
    CredentialFailure,
    CredentialMalformed,
    CredentialMissing,
    CredentialUnsupported,
)
from blog_api.settings import Settings

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass(frozen=True, slots=True)
class Credential:
    token: str = field(repr=False)
    subject: Subject
    issued_at: datetime
    expires_at: datetime
    token_type: str = "Bearer"


class CredentialService:
    def __init__(
        self,
        *,
        cfg: CodecConfig,
        algorithm: str = "HS256",
        lifetime: timedelta = timedelta(hours=1),
        clock: Clock = utcnow,
    ) -> None:
        ttl_seconds = int(lifetime.total_seconds())
        if ttl_seconds <= 0:
            raise ValueError("credential lifetime must be at least one second")
        self._cfg = cfg
        self._algorithm = algorithm
        self._ttl_seconds = ttl_seconds
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, *, clock: Clock = utcnow) -> CredentialService:
        return cls(
            cfg=CodecConfig(
                issuer=settings.jwt_issuer,
                audience=settings.jwt_audience,
                secret=settings.jwt_secret,
            ),
            algorithm=settings.jwt_alg,
            lifetime=timedelta(seconds=settings.jwt_ttl_seconds),
            clock=clock,
        )

    @property
    def lifetime(self) -> timedelta:
        return timedelta(seconds=self._ttl_seconds)

    def issue(self, subject: Subject) -> Credential:
        # Whole seconds: `exp` is compared against the clock at verification time.
        issued_at = int(self._clock().timestamp())
        expires_at = issued_at + self._ttl_seconds
        token = encode(
            Claims(
                subject=subject.name,
                roles=subject.roles,
                issued_at=issued_at,
                expires_at=expires_at,
                version=CREDENTIAL_VERSION,
            ),
            cfg=self._cfg,
            algorithm=self._algorithm,
        )
        return Credential(
            token=token,
            subject=subject,
            issued_at=datetime.fromtimestamp(issued_at, tz=UTC),
            expires_at=datetime.fromtimestamp(expires_at, tz=UTC),
        )

    def verify(self, token: str | None) -> Subject:
        if token is None or not token.strip():
            raise CredentialMissing("JWT claims string is empty", kind=CredentialFailure.empty)

        try:
            decoded = decode(token.strip(), cfg=self._cfg)
        except UnsupportedAlgorithmError as e:
            raise CredentialUnsupported("Unsupported JWT token") from e
        except MalformedTokenError as e:
            raise CredentialMalformed("Invalid JWT token") from e

        # Signature is valid at this point; reject schemes/versions we do not issue.
        if decoded.algorithm != self._algorithm or decoded.claims.version != CREDENTIAL_VERSION:
            raise CredentialUnsupported("Unsupported JWT token")

        if self._clock().timestamp() >= decoded.claims.expires_at:
            raise CredentialExpired("Expired JWT token")

        return Subject(name=decoded.claims.subject, roles=decoded.claims.roles)

    def extract_subject_name(self, token: str | None) -> str:
        return self.verify(token).name


# --- Module Notes -----------------------------------------------------------
# One instance is built at app startup (see `api.app`) and shared across requests;
# it holds no mutable state, so concurrent verification needs no locking.
