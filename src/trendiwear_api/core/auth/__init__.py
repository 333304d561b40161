"""Authentication primitives shared across features."""

from .errors import AuthenticationError, PermissionDeniedError

__all__ = ["AuthenticationError", "PermissionDeniedError"]
