"""
Tests for token issuance and verification.
"""
import logging
from dataclasses import replace
from datetime import datetime, timedelta, timezone
import pytest
from jose import jwt
from taskhub.modules.config import Settings
from taskhub.modules.errors import UnauthorizedError
from taskhub.modules.users.auth.passwords import hash_password, verify_password
from taskhub.modules.users.auth.tokens import TokenService
from taskhub.modules.users.domain.user import User


@pytest.fixture
def token_settings():
    return Settings(jwt_key="unit-test-key", jwt_issuer="issuer-a", jwt_audience="audience-a")


@pytest.fixture
def user():
    return User(id=7, username="u7", email="u7@example.com", password_hash="", created_at=datetime(2026, 1, 1))


def test_issued_token_carries_identity_claims(token_settings, user):
    service = TokenService(token_settings)
    issued = service.issue(user)

    claims = jwt.get_unverified_claims(issued.token)
    assert claims["sub"] == "7"
    assert claims["username"] == "u7"
    assert claims["email"] == "u7@example.com"
    assert claims["iss"] == "issuer-a"
    assert claims["aud"] == "audience-a"

    principal = service.verify(issued.token)
    assert principal.user_id == 7
    assert principal.username == "u7"


def test_token_valid_for_one_hour(token_settings, user):
    now = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)
    issued = TokenService(token_settings).issue(user, now=now)
    assert issued.expires == now + timedelta(hours=1)
    assert issued.expires.tzinfo is not None


def test_expired_token_is_rejected(token_settings, user):
    service = TokenService(token_settings)
    issued = service.issue(user, now=datetime.now(timezone.utc) - timedelta(minutes=61))
    with pytest.raises(UnauthorizedError):
        service.verify(issued.token)


def test_token_from_other_issuer_or_audience_is_rejected(token_settings, user):
    service = TokenService(token_settings)

    other_issuer = TokenService(replace(token_settings, jwt_issuer="issuer-b")).issue(user)
    with pytest.raises(UnauthorizedError):
        service.verify(other_issuer.token)

    other_audience = TokenService(replace(token_settings, jwt_audience="audience-b")).issue(user)
    with pytest.raises(UnauthorizedError):
        service.verify(other_audience.token)


def test_token_signed_with_other_key_is_rejected(token_settings, user):
    forged = TokenService(replace(token_settings, jwt_key="another-key")).issue(user)
    with pytest.raises(UnauthorizedError):
        TokenService(token_settings).verify(forged.token)


def test_missing_key_falls_back_to_random_key_with_warning(caplog, user):
    with caplog.at_level(logging.WARNING, logger="taskhub.users.tokens"):
        first = TokenService(Settings(jwt_key=None))
        second = TokenService(Settings(jwt_key=None))

    assert first.ephemeral_key is True
    assert "JWT_KEY is not set" in caplog.text

    # A restart (new service) invalidates previously issued tokens
    issued = first.issue(user)
    assert first.verify(issued.token).user_id == user.id
    with pytest.raises(UnauthorizedError):
        second.verify(issued.token)


def test_password_hash_is_salted_and_verifiable():
    first = hash_password("Secret1!")
    second = hash_password("Secret1!")

    assert first != second
    assert verify_password("Secret1!", first)
    assert not verify_password("wrong", first)
    assert not verify_password("Secret1!", "")
    assert not verify_password("Secret1!", "not-a-hash")
