"""HTTP-layer helpers: auth dependencies and error translation."""

from .dependencies import (
    AdminUser,
    CurrentUser,
    OptionalUser,
    ProfessionalUser,
    SuperAdminUser,
    ensure_owner_or_admin,
    is_admin,
    require_admin,
    require_roles,
    require_user,
)
from .errors import register_auth_exception_handlers

__all__ = [
    "AdminUser",
    "CurrentUser",
    "OptionalUser",
    "ProfessionalUser",
    "SuperAdminUser",
    "ensure_owner_or_admin",
    "is_admin",
    "register_auth_exception_handlers",
    "require_admin",
    "require_roles",
    "require_user",
]
