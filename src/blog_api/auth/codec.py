"""
blog_api.auth.codec

Signed credential encode/decode (JWT via PyJWT).

Responsibilities:
- Encode a claim set (subject, roles, iat, exp, format version) into a signed token.
- Decode a token, checking structure, signature, issuer/audience and required claims.
- Report decode failures as malformed or unsupported-algorithm; expiry is left
  to the caller so the clock stays injectable.

Note:
- Only the HMAC family is understood. Tokens using any other `alg` cannot be
  signature-checked with a shared secret and are reported as unsupported.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import jwt
from jwt import InvalidAlgorithmError, InvalidTokenError
from jwt.utils import base64url_decode, base64url_encode

CREDENTIAL_VERSION = 1
SUPPORTED_ALGORITHMS: tuple[str, ...] = ("HS256", "HS384", "HS512")


@dataclass(frozen=True, slots=True)
class CodecConfig:
    issuer: str
    audience: str
    # Never rendered in repr; the key must not reach logs or error output.
    secret: str = field(repr=False)


@dataclass(frozen=True, slots=True)
class Claims:
    subject: str
    roles: frozenset[str]
    issued_at: int
    expires_at: int
    version: int | None = CREDENTIAL_VERSION


@dataclass(frozen=True, slots=True)
class DecodedCredential:
    claims: Claims
    algorithm: str


class CredentialDecodeError(Exception):
    pass


class MalformedTokenError(CredentialDecodeError):
    pass


class UnsupportedAlgorithmError(CredentialDecodeError):
    pass


def encode(claims: Claims, *, cfg: CodecConfig, algorithm: str) -> str:
    if algorithm not in SUPPORTED_ALGORITHMS:
        raise ValueError(f"unsupported signing algorithm: {algorithm}")
    # The signature covers every field below; changing any of them invalidates it.
    payload: dict[str, Any] = {
        "iss": cfg.issuer,
        "aud": cfg.audience,
        "sub": claims.subject,
        "roles": sorted(claims.roles),
        "iat": claims.issued_at,
        "exp": claims.expires_at,
        "ver": claims.version,
    }
    return jwt.encode(payload, cfg.secret, algorithm=algorithm)


def decode(token: str, *, cfg: CodecConfig) -> DecodedCredential:
    try:
        payload = jwt.decode(
            token,
            cfg.secret,
            algorithms=list(SUPPORTED_ALGORITHMS),
            issuer=cfg.issuer,
            audience=cfg.audience,
            options={
                "require": ["exp", "iat", "iss", "aud", "sub"],
                "verify_exp": False,
                "verify_iat": False,
            },
        )
        # Safe to trust now: the header is part of the signed input.
        algorithm = str(jwt.get_unverified_header(token).get("alg", ""))
    except InvalidAlgorithmError as e:
        raise UnsupportedAlgorithmError("token signed with an unsupported algorithm") from e
    except InvalidTokenError as e:
        raise MalformedTokenError(f"token failed verification ({type(e).__name__})") from e

    if not _has_canonical_signature(token):
        raise MalformedTokenError("token signature segment is not canonical base64url")

    return DecodedCredential(claims=_claims_from_payload(payload), algorithm=algorithm)


def _claims_from_payload(payload: dict[str, Any]) -> Claims:
    subject = payload.get("sub")
    roles_raw = payload.get("roles", [])
    issued_at = payload.get("iat")
    expires_at = payload.get("exp")
    version = payload.get("ver")

    if not isinstance(subject, str) or not subject:
        raise MalformedTokenError("token subject is missing or not a string")
    if not isinstance(roles_raw, list) or not all(isinstance(r, str) for r in roles_raw):
        raise MalformedTokenError("token roles must be a list of strings")
    if not _is_timestamp(issued_at) or not _is_timestamp(expires_at):
        raise MalformedTokenError("token timestamps must be numeric")
    if version is not None and not isinstance(version, int):
        raise MalformedTokenError("token version must be an integer")

    return Claims(
        subject=subject,
        roles=frozenset(roles_raw),
        issued_at=int(issued_at),
        expires_at=int(expires_at),
        version=version,
    )


def _has_canonical_signature(token: str) -> bool:
    # The unused low bits of the final character must be zero.
    signature = token.rsplit(".", 1)[-1]
    return base64url_encode(base64url_decode(signature)).decode("ascii") == signature


def _is_timestamp(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


# --- Module Notes -----------------------------------------------------------
# The codec is a pure transform over the secret; CredentialService owns the clock,
# the configured algorithm and the failure taxonomy.
