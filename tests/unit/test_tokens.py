from __future__ import annotations

from datetime import timedelta

import pytest

from trendiwear_api.core.auth.errors import AuthenticationError
from trendiwear_api.core.security.tokens import claims_from_payload, read_bearer_claims

from ..utils import make_token

SECRET = "unit-test-secret-with-more-than-32-chars"


def test_read_bearer_claims_returns_identity() -> None:
    token = make_token(
        "Wanjiru@Example.Test", secret=SECRET, given_name="Wanjiru", family_name="Kamau"
    )

    claims = read_bearer_claims(token, secret=SECRET, algorithms=["HS256"])

    assert claims.email == "wanjiru@example.test"
    assert claims.given_name == "Wanjiru"
    assert claims.family_name == "Kamau"
    assert claims.picture is None


def test_expired_token_is_rejected() -> None:
    token = make_token("late@example.test", secret=SECRET, expires_in=timedelta(minutes=-5))

    with pytest.raises(AuthenticationError, match="expired"):
        read_bearer_claims(token, secret=SECRET, algorithms=["HS256"])


def test_token_signed_with_another_secret_is_rejected() -> None:
    token = make_token("mallory@example.test", secret="x" * 40)

    with pytest.raises(AuthenticationError, match="Invalid access token"):
        read_bearer_claims(token, secret=SECRET, algorithms=["HS256"])


def test_payload_without_email_is_rejected() -> None:
    with pytest.raises(AuthenticationError):
        claims_from_payload({"sub": "abc", "email": "not-an-email"})
