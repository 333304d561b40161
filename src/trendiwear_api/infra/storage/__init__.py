"""Object storage adapters."""

from .base import ObjectExistsError, StorageAdapter, StorageError, StorageLimitError, StoredObject
from .factory import (
    build_storage_adapter,
    get_storage_adapter,
    init_storage,
    mount_public_storage,
    shutdown_storage,
)
from .filesystem import FilesystemStorage

__all__ = [
    "FilesystemStorage",
    "ObjectExistsError",
    "StorageAdapter",
    "StorageError",
    "StorageLimitError",
    "StoredObject",
    "build_storage_adapter",
    "get_storage_adapter",
    "init_storage",
    "mount_public_storage",
    "shutdown_storage",
]
