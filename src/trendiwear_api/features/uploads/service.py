"""Image uploads into the configured object store."""

from __future__ import annotations

import logging
import mimetypes
import re
import time
from pathlib import PurePosixPath

from fastapi import UploadFile

from trendiwear_api.common.logging import log_context
from trendiwear_api.infra.storage import StorageAdapter, StorageLimitError
from trendiwear_api.models import User
from trendiwear_api.settings import Settings

from .exceptions import InvalidUploadError, UploadTooLargeError
from .schemas import UploadResult

logger = logging.getLogger(__name__)

_FOLDER_SEGMENT = re.compile(r"^[A-Za-z0-9_-]+$")
_EXTENSION = re.compile(r"^[A-Za-z0-9]{1,10}$")


def normalize_folder(raw: str | None, *, default: str) -> str:
    """Validate a slash-separated folder of simple segments."""

    value = (raw or "").strip().strip("/") or default
    segments = value.split("/")
    if not all(_FOLDER_SEGMENT.match(segment) for segment in segments):
        raise InvalidUploadError("Invalid folder name.")
    return "/".join(segments)


def file_extension(filename: str | None, content_type: str) -> str:
    """Extension from the client file name, falling back to the content type."""

    suffix = PurePosixPath(filename or "").suffix.lstrip(".").lower()
    if suffix and _EXTENSION.match(suffix):
        return suffix
    guessed = mimetypes.guess_extension(content_type) or ".bin"
    return guessed.lstrip(".")


def object_key(*, folder: str, user_id: str, extension: str, now_ms: int | None = None) -> str:
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    return f"{folder}/{user_id}/{stamp}.{extension}"


class UploadsService:
    def __init__(self, *, storage: StorageAdapter, settings: Settings) -> None:
        self._storage = storage
        self._settings = settings

    async def upload_image(
        self, *, user: User, upload: UploadFile, folder: str | None = None
    ) -> UploadResult:
        content_type = (upload.content_type or "").lower()
        if content_type not in self._settings.upload_allowed_types:
            raise InvalidUploadError(
                "Invalid file type. Only JPEG, PNG, WebP, and GIF are allowed."
            )
        limit = self._settings.upload_max_bytes
        if upload.size is not None and upload.size > limit:
            raise UploadTooLargeError(limit=limit, received=upload.size)

        target_folder = normalize_folder(folder, default=self._settings.upload_default_folder)
        key = object_key(
            folder=target_folder,
            user_id=str(user.id),
            extension=file_extension(upload.filename, content_type),
        )
        bucket = self._settings.storage_bucket

        logger.debug(
            "uploads.write.start",
            extra=log_context(user_id=str(user.id), bucket=bucket, key=key),
        )
        await upload.seek(0)
        try:
            stored = await self._storage.write(bucket, key, upload.file, max_bytes=limit)
        except StorageLimitError as exc:
            raise UploadTooLargeError(limit=exc.limit, received=exc.received) from exc

        logger.info(
            "uploads.write.success",
            extra=log_context(
                user_id=str(user.id),
                bucket=bucket,
                key=key,
                byte_size=stored.byte_size,
                content_type=content_type,
            ),
        )
        return UploadResult(
            url=stored.url,
            path=stored.key,
            bucket=stored.bucket,
            provider=self._storage.provider,
        )


__all__ = ["UploadsService", "file_extension", "normalize_folder", "object_key"]
