from datetime import datetime, timedelta, timezone

import jwt
import pytest

from resource_hub.features.auth.exceptions import InvalidOrExpiredToken
from resource_hub.features.auth.models.user import UserRole
from resource_hub.features.auth.services.session_issuer import SessionIssuer

SECRET = "issuer-test-secret"


@pytest.fixture
def issuer():
    return SessionIssuer(secret_key=SECRET, expires_delta=timedelta(days=7))


def test_issue_and_validate_round_trip(issuer):
    token = issuer.issue("user-1", "alice@college.edu", UserRole.faculty)

    claims = issuer.validate(token)

    assert claims.user_id == "user-1"
    assert claims.email == "alice@college.edu"
    assert claims.role == UserRole.faculty
    assert claims.expires_at - claims.issued_at == timedelta(days=7)


def test_token_payload_uses_plain_role_value(issuer):
    token = issuer.issue("user-1", "alice@college.edu", "admin")

    payload = jwt.decode(token, SECRET, algorithms=["HS256"])

    assert payload["sub"] == "user-1"
    assert payload["role"] == "admin"


def test_expired_token_is_rejected(issuer):
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {
            "sub": "user-1",
            "email": "alice@college.edu",
            "role": "student",
            "iat": now - timedelta(days=8),
            "exp": now - timedelta(days=1),
        },
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidOrExpiredToken) as exc_info:
        issuer.validate(token)

    assert exc_info.value.message == "Token has expired"


def test_token_signed_with_other_key_is_rejected(issuer):
    forged = SessionIssuer(secret_key="someone-else").issue("user-1", "alice@college.edu", "admin")

    with pytest.raises(InvalidOrExpiredToken):
        issuer.validate(forged)


def test_garbage_token_is_rejected(issuer):
    with pytest.raises(InvalidOrExpiredToken):
        issuer.validate("not-a-jwt")


def test_token_with_unknown_role_is_rejected(issuer):
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"sub": "user-1", "email": "a@b.edu", "role": "root", "iat": now, "exp": now + timedelta(hours=1)},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidOrExpiredToken):
        issuer.validate(token)


def test_token_missing_subject_is_rejected(issuer):
    now = datetime.now(timezone.utc)
    token = jwt.encode(
        {"email": "a@b.edu", "role": "student", "iat": now, "exp": now + timedelta(hours=1)},
        SECRET,
        algorithm="HS256",
    )

    with pytest.raises(InvalidOrExpiredToken):
        issuer.validate(token)
