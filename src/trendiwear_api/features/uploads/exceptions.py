"""Upload-specific failures mapped to HTTP statuses by the router."""

from __future__ import annotations


class UploadTooLargeError(Exception):
    def __init__(self, *, limit: int, received: int) -> None:
        limit_mb = limit / (1024 * 1024)
        super().__init__(f"File too large. Maximum size is {limit_mb:g}MB.")
        self.limit = limit
        self.received = received


class InvalidUploadError(Exception):
    """Raised for a missing file, a disallowed content type or an unusable folder."""


__all__ = ["InvalidUploadError", "UploadTooLargeError"]
