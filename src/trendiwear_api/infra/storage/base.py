"""Base interfaces for object storage adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO


class StorageError(Exception):
    """Raised when a storage adapter encounters an unrecoverable error."""


class StorageLimitError(StorageError):
    """Raised when a storage write exceeds configured limits."""

    def __init__(self, *, limit: int, received: int) -> None:
        super().__init__(
            f"Object exceeds maximum size of {limit} bytes (received {received} bytes).",
        )
        self.limit = limit
        self.received = received


class ObjectExistsError(StorageError):
    """Raised when writing to an existing key without ``upsert``."""

    def __init__(self, *, bucket: str, key: str) -> None:
        super().__init__(f"Object {key!r} already exists in bucket {bucket!r}.")
        self.bucket = bucket
        self.key = key


@dataclass(slots=True)
class StoredObject:
    """Metadata describing an object persisted by a storage adapter."""

    bucket: str
    key: str
    sha256: str
    byte_size: int
    url: str


class StorageAdapter(ABC):
    """Contract implemented by bucket/key object stores."""

    provider: str = "unknown"

    @abstractmethod
    async def write(
        self,
        bucket: str,
        key: str,
        stream: BinaryIO,
        *,
        max_bytes: int | None = None,
        upsert: bool = False,
    ) -> StoredObject:
        """Persist ``stream`` under ``bucket``/``key`` and describe the stored object."""

    @abstractmethod
    async def delete(self, bucket: str, key: str) -> None:
        """Remove ``bucket``/``key`` if it exists."""

    @abstractmethod
    def public_url(self, bucket: str, key: str) -> str:
        """Return the URL clients use to fetch ``bucket``/``key``."""
