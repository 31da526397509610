import base64
from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.domain.exceptions import AuthTokenError
from app.security.principal import Principal
from app.security.tokens import JwtUtils

SECRET = base64.b64encode(b"unit-test-signing-key-that-is-long-enough-for-hs256").decode()
OTHER_SECRET = base64.b64encode(b"a-completely-different-signing-key-for-hs256-tests").decode()

PRINCIPAL = Principal(id=7, email="user7@email.com", roles=("ROLE_USER",))


@pytest.fixture
def jwt_utils():
    return JwtUtils(secret=SECRET, expiration_ms=60 * 60 * 1000)


def test_token_carries_subject_and_claims(jwt_utils):
    token = jwt_utils.generate_token(PRINCIPAL)

    claims = jwt_utils.validate_token(token)

    assert claims["sub"] == "user7@email.com"
    assert claims["id"] == 7
    assert claims["roles"] == ["ROLE_USER"]
    assert claims["exp"] - claims["iat"] == 3600
    assert jwt_utils.get_username_from_token(token) == "user7@email.com"


def test_expired_token_is_rejected(jwt_utils):
    issued = datetime.now(timezone.utc) - timedelta(hours=2)
    token = jwt_utils.generate_token(PRINCIPAL, now=issued)

    with pytest.raises(AuthTokenError):
        jwt_utils.validate_token(token)


def test_tampered_signature_is_rejected(jwt_utils):
    header, payload, signature = jwt_utils.generate_token(PRINCIPAL).split(".")
    # pierwszy znak podpisu niesie same bity danych
    flipped = ("A" if signature[0] != "A" else "B") + signature[1:]

    with pytest.raises(AuthTokenError):
        jwt_utils.validate_token(f"{header}.{payload}.{flipped}")


def test_token_signed_with_other_key_is_rejected(jwt_utils):
    token = JwtUtils(secret=OTHER_SECRET).generate_token(PRINCIPAL)

    with pytest.raises(AuthTokenError):
        jwt_utils.validate_token(token)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_malformed_token_is_rejected(jwt_utils, token):
    with pytest.raises(AuthTokenError):
        jwt_utils.validate_token(token)


def test_token_without_expiry_is_rejected(jwt_utils):
    token = jwt.encode({"sub": "user7@email.com", "iat": datetime.now(timezone.utc)}, jwt_utils.key, algorithm="HS256")

    with pytest.raises(AuthTokenError):
        jwt_utils.validate_token(token)


def test_secret_must_be_base64():
    with pytest.raises(ValueError):
        JwtUtils(secret="not base64 at all!")
