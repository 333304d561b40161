"""Authentication and role-guard dependencies for routers."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Annotated

from fastapi import Depends, Request

from trendiwear_api.api.deps import SessionDep, SettingsDep
from trendiwear_api.common.logging import log_context
from trendiwear_api.core.auth.errors import AuthenticationError, PermissionDeniedError
from trendiwear_api.core.security.tokens import TokenClaims, read_bearer_claims
from trendiwear_api.models import ADMIN_ROLES, User, UserRole

logger = logging.getLogger(__name__)

RoleDependency = Callable[..., Awaitable[User]]


def _bearer_token(request: Request) -> str | None:
    header = request.headers.get("authorization") or ""
    scheme, _, token = header.partition(" ")
    candidate = token.strip() if scheme.lower() == "bearer" else ""
    return candidate or None


async def get_token_claims(request: Request, settings: SettingsDep) -> TokenClaims | None:
    """Return validated claims for the request's bearer token, if any."""

    token = _bearer_token(request)
    if token is None:
        return None
    return read_bearer_claims(
        token,
        secret=settings.jwt_secret_value,
        algorithms=[settings.jwt_algorithm],
        audience=settings.jwt_audience,
        leeway=settings.jwt_leeway_seconds,
    )


async def get_optional_user(
    claims: Annotated[TokenClaims | None, Depends(get_token_claims)],
    session: SessionDep,
    settings: SettingsDep,
) -> User | None:
    """Resolve the caller, provisioning a CUSTOMER account on first sight."""

    if claims is None:
        return None

    from trendiwear_api.features.users.repository import UsersRepository

    repo = UsersRepository(session)
    user = await repo.get_by_email(claims.email)
    if user is None:
        if not settings.auth_auto_provision:
            raise AuthenticationError("Unknown user.")
        user = await repo.create(
            email=claims.email,
            first_name=claims.given_name,
            last_name=claims.family_name,
            profile_image=claims.picture,
            role=UserRole.CUSTOMER,
        )
        logger.info(
            "auth.user.provisioned",
            extra=log_context(user_id=str(user.id), email=user.email),
        )
    if not user.is_active:
        raise AuthenticationError("User account is inactive.")
    return user


async def require_user(
    user: Annotated[User | None, Depends(get_optional_user)],
) -> User:
    """Ensure the request is authenticated and return the persisted user."""

    if user is None:
        raise AuthenticationError("Unauthorized")
    return user


def require_roles(*roles: UserRole) -> RoleDependency:
    """Return a dependency that admits only callers holding one of ``roles``."""

    allowed = frozenset(roles)

    async def dependency(user: Annotated[User, Depends(require_user)]) -> User:
        if UserRole(user.role) not in allowed:
            raise PermissionDeniedError(
                "Forbidden",
                required_roles=[role.value for role in allowed],
            )
        return user

    return dependency


require_admin = require_roles(*ADMIN_ROLES)
require_super_admin = require_roles(UserRole.SUPER_ADMIN)
require_professional = require_roles(UserRole.PROFESSIONAL)


def is_admin(user: User) -> bool:
    return UserRole(user.role) in ADMIN_ROLES


def ensure_owner_or_admin(user: User, owner_id: object, message: str = "Forbidden") -> None:
    """Raise :class:`PermissionDeniedError` unless ``user`` owns the row or is an admin."""

    if user.id != owner_id and not is_admin(user):
        raise PermissionDeniedError(message)


CurrentUser = Annotated[User, Depends(require_user)]
OptionalUser = Annotated[User | None, Depends(get_optional_user)]
AdminUser = Annotated[User, Depends(require_admin)]
SuperAdminUser = Annotated[User, Depends(require_super_admin)]
ProfessionalUser = Annotated[User, Depends(require_professional)]


__all__ = [
    "AdminUser",
    "CurrentUser",
    "OptionalUser",
    "ProfessionalUser",
    "SuperAdminUser",
    "ensure_owner_or_admin",
    "get_optional_user",
    "get_token_claims",
    "is_admin",
    "require_admin",
    "require_professional",
    "require_roles",
    "require_super_admin",
    "require_user",
]
