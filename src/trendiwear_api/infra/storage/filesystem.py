"""Local filesystem-backed storage adapter."""

from __future__ import annotations

from hashlib import sha256
from pathlib import Path
from typing import BinaryIO
from urllib.parse import quote

from fastapi.concurrency import run_in_threadpool

from .base import ObjectExistsError, StorageAdapter, StorageError, StorageLimitError, StoredObject

_DEFAULT_CHUNK_SIZE = 1024 * 1024  # 1 MiB


class FilesystemStorage(StorageAdapter):
    """Store objects as ``<base_dir>/<bucket>/<key>`` files.

    Public URLs are ``<public_base_url>/<bucket>/<key>``; the application mounts
    ``base_dir`` read-only at that base so the URLs resolve.
    """

    provider = "filesystem"

    def __init__(self, base_dir: Path, *, public_base_url: str) -> None:
        self._base_dir = Path(base_dir).expanduser().resolve()
        self._public_base_url = public_base_url.rstrip("/")
        self._base_dir.mkdir(parents=True, exist_ok=True)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def path_for(self, bucket: str, key: str) -> Path:
        """Return the absolute filesystem path for ``bucket``/``key``."""

        relative = f"{bucket.strip('/')}/{key.lstrip('/')}"
        candidate = (self._base_dir / relative).resolve()
        try:
            candidate.relative_to(self._base_dir)
        except ValueError as exc:
            raise StorageError("Storage key escapes the configured base directory.") from exc
        return candidate

    def public_url(self, bucket: str, key: str) -> str:
        return f"{self._public_base_url}/{quote(bucket.strip('/'))}/{quote(key.lstrip('/'))}"

    async def write(
        self,
        bucket: str,
        key: str,
        stream: BinaryIO,
        *,
        max_bytes: int | None = None,
        upsert: bool = False,
    ) -> StoredObject:
        """Persist ``stream`` to storage returning metadata about the write."""

        destination = self.path_for(bucket, key)

        def _write() -> StoredObject:
            if destination.exists() and not upsert:
                raise ObjectExistsError(bucket=bucket, key=key)

            rewind = getattr(stream, "seek", None)
            if callable(rewind):
                try:
                    rewind(0)
                except (OSError, ValueError):
                    pass

            size = 0
            digest = sha256()
            destination.parent.mkdir(parents=True, exist_ok=True)

            success = False
            try:
                with destination.open("wb") as target:
                    while True:
                        chunk = stream.read(_DEFAULT_CHUNK_SIZE)
                        if not chunk:
                            break
                        size += len(chunk)
                        if max_bytes is not None and size > max_bytes:
                            raise StorageLimitError(limit=max_bytes, received=size)
                        target.write(chunk)
                        digest.update(chunk)
                success = True
            finally:
                if not success:
                    destination.unlink(missing_ok=True)

            return StoredObject(
                bucket=bucket,
                key=key,
                sha256=digest.hexdigest(),
                byte_size=size,
                url=self.public_url(bucket, key),
            )

        return await run_in_threadpool(_write)

    async def delete(self, bucket: str, key: str) -> None:
        """Delete ``bucket``/``key`` if it exists."""

        path = self.path_for(bucket, key)

        def _remove() -> None:
            try:
                path.unlink()
            except FileNotFoundError:
                return

        await run_in_threadpool(_remove)
