"""
tests.test_credentials

Credential issuance, verification, and failure classification.
"""

from __future__ import annotations

import string
from datetime import timedelta

import jwt
import pytest

from blog_api.auth.codec import CREDENTIAL_VERSION, Claims, CodecConfig, encode
from blog_api.auth.credentials import CredentialService
from blog_api.auth.models import Subject
from blog_api.errors import (
    CredentialExpired,
    CredentialFailure,
    CredentialMalformed,
    CredentialMissing,
    CredentialUnsupported,
)


_B64URL = string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_"


def _claims(clock, *, subject: str = "admin", version: int | None = CREDENTIAL_VERSION) -> Claims:
    now = int(clock().timestamp())
    return Claims(
        subject=subject,
        roles=frozenset({"ADMIN"}),
        issued_at=now,
        expires_at=now + 3600,
        version=version,
    )


def _tamper_signature(token: str) -> str:
    header, payload, signature = token.split(".")
    # A middle character always contributes six full bits of the decoded signature.
    i = len(signature) // 2
    replacement = "A" if signature[i] != "A" else "B"
    return ".".join([header, payload, signature[:i] + replacement + signature[i + 1 :]])


def test_issue_then_verify_returns_same_subject(
    credentials: CredentialService, admin: Subject
) -> None:
    credential = credentials.issue(admin)

    subject = credentials.verify(credential.token)

    assert subject == admin
    assert credential.expires_at - credential.issued_at == credentials.lifetime
    assert credentials.extract_subject_name(credential.token) == "admin"


def test_roles_are_carried_verbatim(credentials: CredentialService, reader: Subject) -> None:
    subject = credentials.verify(credentials.issue(reader).token)
    assert subject.roles == frozenset({"USER"})
    assert not subject.is_admin


def test_token_is_hidden_from_repr(credentials: CredentialService, admin: Subject) -> None:
    credential = credentials.issue(admin)
    assert credential.token not in repr(credential)


def test_secret_is_hidden_from_repr(codec_cfg: CodecConfig) -> None:
    assert codec_cfg.secret not in repr(codec_cfg)


def test_still_valid_one_second_before_expiry(credentials, clock, admin) -> None:
    token = credentials.issue(admin).token
    clock.advance(credentials.lifetime - timedelta(seconds=1))
    assert credentials.verify(token).name == "admin"


@pytest.mark.parametrize("extra", [timedelta(0), timedelta(seconds=1), timedelta(days=3)])
def test_expired_after_lifetime(credentials, clock, admin, extra: timedelta) -> None:
    token = credentials.issue(admin).token
    clock.advance(credentials.lifetime + extra)

    with pytest.raises(CredentialExpired) as exc_info:
        credentials.verify(token)
    assert exc_info.value.kind is CredentialFailure.expired


@pytest.mark.parametrize("token", [None, "", "   ", "\t\n"])
def test_empty_token(credentials: CredentialService, token: str | None) -> None:
    with pytest.raises(CredentialMissing) as exc_info:
        credentials.verify(token)
    assert exc_info.value.kind is CredentialFailure.empty


@pytest.mark.parametrize("token", ["abc", "a.b.c", "not-a-jwt-at-all", "x.y"])
def test_garbage_is_malformed(credentials: CredentialService, token: str) -> None:
    with pytest.raises(CredentialMalformed):
        credentials.verify(token)


def test_tampered_signature_is_malformed(credentials, admin) -> None:
    token = credentials.issue(admin).token

    with pytest.raises(CredentialMalformed) as exc_info:
        credentials.verify(_tamper_signature(token))
    assert exc_info.value.kind is CredentialFailure.malformed


@pytest.mark.parametrize("bit", [1, 2, 16])
def test_tampered_final_signature_character_is_malformed(credentials, admin, bit: int) -> None:
    header, payload, signature = credentials.issue(admin).token.split(".")
    # Low bits of the last character fall outside the 32-byte HS256 MAC.
    last = _B64URL[_B64URL.index(signature[-1]) ^ bit]
    token = ".".join([header, payload, signature[:-1] + last])

    with pytest.raises(CredentialMalformed):
        credentials.verify(token)


def test_tampered_payload_is_malformed(credentials, clock, codec_cfg, reader) -> None:
    token = credentials.issue(reader).token
    forged = encode(_claims(clock, subject="reader"), cfg=codec_cfg, algorithm="HS256")
    # Graft an ADMIN payload onto the reader's signature.
    header, _, signature = token.split(".")
    _, forged_payload, _ = forged.split(".")

    with pytest.raises(CredentialMalformed):
        credentials.verify(".".join([header, forged_payload, signature]))


def test_wrong_key_is_malformed(credentials, clock) -> None:
    other = CodecConfig(issuer="blog-api", audience="blog-api-clients", secret="x" * 40)
    token = encode(_claims(clock), cfg=other, algorithm="HS256")
    with pytest.raises(CredentialMalformed):
        credentials.verify(token)


def test_wrong_audience_is_malformed(credentials, clock, codec_cfg) -> None:
    cfg = CodecConfig(issuer=codec_cfg.issuer, audience="someone-else", secret=codec_cfg.secret)
    token = encode(_claims(clock), cfg=cfg, algorithm="HS256")
    with pytest.raises(CredentialMalformed):
        credentials.verify(token)


def test_other_hmac_scheme_is_unsupported(credentials, clock, codec_cfg) -> None:
    token = encode(_claims(clock), cfg=codec_cfg, algorithm="HS512")
    with pytest.raises(CredentialUnsupported) as exc_info:
        credentials.verify(token)
    assert exc_info.value.kind is CredentialFailure.unsupported


def test_unsigned_token_is_unsupported(credentials, clock, codec_cfg) -> None:
    claims = _claims(clock)
    token = jwt.encode(
        {
            "iss": codec_cfg.issuer,
            "aud": codec_cfg.audience,
            "sub": claims.subject,
            "roles": ["ADMIN"],
            "iat": claims.issued_at,
            "exp": claims.expires_at,
            "ver": CREDENTIAL_VERSION,
        },
        None,
        algorithm="none",
    )
    with pytest.raises(CredentialUnsupported):
        credentials.verify(token)


@pytest.mark.parametrize("version", [None, CREDENTIAL_VERSION + 1])
def test_unknown_version_is_unsupported(credentials, clock, codec_cfg, version) -> None:
    token = encode(_claims(clock, version=version), cfg=codec_cfg, algorithm="HS256")
    with pytest.raises(CredentialUnsupported):
        credentials.verify(token)


def test_scheme_is_checked_before_expiry(credentials, clock, codec_cfg) -> None:
    token = encode(_claims(clock), cfg=codec_cfg, algorithm="HS384")
    clock.advance(timedelta(days=1))
    with pytest.raises(CredentialUnsupported):
        credentials.verify(token)


def test_signature_is_checked_before_expiry(credentials, clock, admin) -> None:
    token = credentials.issue(admin).token
    clock.advance(timedelta(days=1))
    with pytest.raises(CredentialMalformed):
        credentials.verify(_tamper_signature(token))


def test_error_messages_do_not_echo_token_or_key(credentials, admin, codec_cfg) -> None:
    token = _tamper_signature(credentials.issue(admin).token)
    with pytest.raises(CredentialMalformed) as exc_info:
        credentials.verify(token)
    rendered = str(exc_info.value.to_response())
    assert token not in rendered
    assert codec_cfg.secret not in rendered


def test_lifetime_must_be_positive(codec_cfg) -> None:
    with pytest.raises(ValueError):
        CredentialService(cfg=codec_cfg, lifetime=timedelta(0))
