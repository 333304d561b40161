"""JWT helpers for decoding identity-provider bearer tokens."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

import jwt

from trendiwear_api.core.auth.errors import AuthenticationError


@dataclass(frozen=True, slots=True)
class TokenClaims:
    """Identity claims the API relies on."""

    email: str
    subject: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    picture: str | None = None


def decode_token(
    token: str,
    *,
    secret: str,
    algorithms: Sequence[str],
    audience: str | None = None,
    leeway: int = 0,
) -> dict[str, Any]:
    """Decode a JWT and return its payload."""

    options: dict[str, Any] = {"require": ["exp"]}
    if audience is None:
        options["verify_aud"] = False
    return jwt.decode(
        token,
        secret,
        algorithms=list(algorithms),
        audience=audience,
        leeway=leeway,
        options=options,
    )


def claims_from_payload(payload: dict[str, Any]) -> TokenClaims:
    email = str(payload.get("email") or "").strip().lower()
    if not email or "@" not in email:
        raise AuthenticationError("Token does not carry an email address.")
    return TokenClaims(
        email=email,
        subject=_optional_str(payload.get("sub")),
        given_name=_optional_str(payload.get("given_name")),
        family_name=_optional_str(payload.get("family_name")),
        picture=_optional_str(payload.get("picture")),
    )


def read_bearer_claims(
    token: str,
    *,
    secret: str,
    algorithms: Sequence[str],
    audience: str | None = None,
    leeway: int = 0,
) -> TokenClaims:
    """Validate ``token`` and return its identity claims.

    Any decoding failure is reported as :class:`AuthenticationError`.
    """

    try:
        payload = decode_token(
            token,
            secret=secret,
            algorithms=algorithms,
            audience=audience,
            leeway=leeway,
        )
    except jwt.ExpiredSignatureError as exc:
        raise AuthenticationError("Access token has expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise AuthenticationError("Invalid access token.") from exc
    return claims_from_payload(payload)


def _optional_str(value: Any) -> str | None:
    if value in (None, ""):
        return None
    return str(value).strip() or None


__all__ = ["TokenClaims", "claims_from_payload", "decode_token", "read_bearer_claims"]
