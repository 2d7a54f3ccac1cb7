"""Token service tests — issue, verify, and each failure kind.

Learn: Expiry is tested by backdating issued_at rather than sleeping or
patching the clock: a token issued 61 minutes ago has an exp one minute
in the past.
"""

from datetime import datetime, timedelta, timezone

import jwt as pyjwt
import pytest

from postboard.auth.jwt import (
    ExpiredTokenError,
    MalformedTokenError,
    TokenMissingError,
    TokenSignatureError,
    create_access_token,
    verify_token,
)
from postboard.config import Settings

SECRET = "unit-test-secret-0123456789abcdef0123456789"


@pytest.fixture()
def token_settings() -> Settings:
    return Settings(jwt_secret=SECRET)


def test_token_round_trips_subject(token_settings):
    token = create_access_token(42, token_settings)
    assert verify_token(token, token_settings) == 42


def test_token_claims(token_settings):
    token = create_access_token(7, token_settings)
    payload = pyjwt.decode(token, SECRET, algorithms=["HS256"])
    assert payload["sub"] == "7"
    assert payload["exp"] - payload["iat"] == 3600


def test_token_valid_just_before_expiry(token_settings):
    issued = datetime.now(timezone.utc) - timedelta(minutes=59)
    token = create_access_token(3, token_settings, issued_at=issued)
    assert verify_token(token, token_settings) == 3


def test_token_expired_after_one_hour(token_settings):
    issued = datetime.now(timezone.utc) - timedelta(hours=1, minutes=1)
    token = create_access_token(3, token_settings, issued_at=issued)
    with pytest.raises(ExpiredTokenError):
        verify_token(token, token_settings)


def test_missing_token(token_settings):
    with pytest.raises(TokenMissingError):
        verify_token(None, token_settings)
    with pytest.raises(TokenMissingError):
        verify_token("", token_settings)


def test_malformed_token(token_settings):
    with pytest.raises(MalformedTokenError):
        verify_token("not.a.jwt", token_settings)
    with pytest.raises(MalformedTokenError):
        verify_token("garbage", token_settings)


def test_wrong_secret_is_signature_error(token_settings):
    other = Settings(jwt_secret="another-secret-0123456789abcdef0123456789")
    token = create_access_token(5, other)
    with pytest.raises(TokenSignatureError):
        verify_token(token, token_settings)


def test_swapped_payload_is_signature_error(token_settings):
    """Grafting another token's payload onto a signature is detected."""
    header, _, signature = create_access_token(1, token_settings).split(".")
    _, payload, _ = create_access_token(2, token_settings).split(".")
    with pytest.raises(TokenSignatureError):
        verify_token(f"{header}.{payload}.{signature}", token_settings)


def test_token_without_subject_is_malformed(token_settings):
    token = pyjwt.encode(
        {"exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        SECRET,
        algorithm="HS256",
    )
    with pytest.raises(MalformedTokenError):
        verify_token(token, token_settings)


def test_non_numeric_subject_is_malformed(token_settings):
    token = pyjwt.encode(
        {"sub": "admin", "exp": datetime.now(timezone.utc) + timedelta(minutes=5)},
        SECRET,
        algorithm="HS256",
    )
    with pytest.raises(MalformedTokenError):
        verify_token(token, token_settings)
