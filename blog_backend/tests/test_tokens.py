from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from blog_backend.application.interfaces import VerificationFailure
from blog_backend.application.services.tokens import JwtTokenService
from blog_backend.domain.users.entities import SessionClaims

SECRET = "unit-test-secret"


def _flip_char(text: str, index: int) -> str:
    replacement = "A" if text[index] != "A" else "B"
    return text[:index] + replacement + text[index + 1 :]


def test_issued_token_verifies_with_same_claims():
    service = JwtTokenService(secret=SECRET, ttl_seconds=60)
    claims = SessionClaims(user_id=7, user_name="alice")

    result = service.verify(service.issue(claims))

    assert result.ok
    assert result.failure is None
    assert result.claims == claims


def test_token_carries_issued_at_and_expiry():
    now = datetime(2030, 1, 1, tzinfo=UTC)
    service = JwtTokenService(secret=SECRET, ttl_seconds=120, clock=lambda: now)

    token = service.issue(SessionClaims(user_id=1, user_name="bob"))
    payload = jwt.decode(
        token, SECRET, algorithms=["HS256"], options={"verify_exp": False, "verify_iat": False}
    )

    assert payload["id"] == 1
    assert payload["name"] == "bob"
    assert payload["exp"] - payload["iat"] == 120


@pytest.mark.parametrize("token", [None, ""])
def test_missing_token_is_reported_as_absent(token):
    service = JwtTokenService(secret=SECRET, ttl_seconds=60)

    result = service.verify(token)

    assert not result.ok
    assert result.failure is VerificationFailure.ABSENT


def test_expired_token_is_invalid():
    issued_at = datetime.now(UTC) - timedelta(hours=2)
    issuer = JwtTokenService(secret=SECRET, ttl_seconds=60, clock=lambda: issued_at)
    verifier = JwtTokenService(secret=SECRET, ttl_seconds=60)

    token = issuer.issue(SessionClaims(user_id=1, user_name="alice"))
    result = verifier.verify(token)

    assert not result.ok
    assert result.failure is VerificationFailure.INVALID


def test_tampered_signature_is_invalid():
    service = JwtTokenService(secret=SECRET, ttl_seconds=60)
    header, payload, signature = service.issue(
        SessionClaims(user_id=1, user_name="alice")
    ).split(".")

    tampered = ".".join([header, payload, _flip_char(signature, 0)])

    assert service.verify(tampered).failure is VerificationFailure.INVALID


def test_tampered_payload_is_invalid():
    service = JwtTokenService(secret=SECRET, ttl_seconds=60)
    header, payload, signature = service.issue(
        SessionClaims(user_id=1, user_name="alice")
    ).split(".")

    tampered = ".".join([header, _flip_char(payload, len(payload) // 2), signature])

    assert service.verify(tampered).failure is VerificationFailure.INVALID


def test_token_signed_with_other_secret_is_invalid():
    other = JwtTokenService(secret="someone-else", ttl_seconds=60)
    service = JwtTokenService(secret=SECRET, ttl_seconds=60)

    token = other.issue(SessionClaims(user_id=1, user_name="alice"))

    assert service.verify(token).failure is VerificationFailure.INVALID


def test_garbage_token_is_invalid():
    service = JwtTokenService(secret=SECRET, ttl_seconds=60)

    assert service.verify("not.a.token").failure is VerificationFailure.INVALID


def test_token_without_identity_claims_is_invalid():
    service = JwtTokenService(secret=SECRET, ttl_seconds=60)
    now = int(datetime.now(UTC).timestamp())
    token = jwt.encode({"iat": now, "exp": now + 60}, SECRET, algorithm="HS256")

    assert service.verify(token).failure is VerificationFailure.INVALID


def test_blank_secret_is_refused():
    with pytest.raises(ValueError):
        JwtTokenService(secret="", ttl_seconds=60)
