"""Shared auth/permission error types."""

from __future__ import annotations

from collections.abc import Iterable


class AuthenticationError(Exception):
    """Raised when a request cannot be authenticated."""


class PermissionDeniedError(Exception):
    """Raised when the caller lacks a required role or ownership."""

    def __init__(
        self,
        message: str = "Forbidden",
        *,
        required_roles: Iterable[str] | None = None,
    ) -> None:
        self.required_roles = sorted(str(role) for role in (required_roles or ()))
        super().__init__(message)
