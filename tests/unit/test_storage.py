from __future__ import annotations

import io
from pathlib import Path

import pytest

from trendiwear_api.infra.storage import (
    FilesystemStorage,
    ObjectExistsError,
    StorageError,
    StorageLimitError,
)


@pytest.fixture()
def storage(tmp_path: Path) -> FilesystemStorage:
    return FilesystemStorage(tmp_path / "store", public_base_url="http://cdn.example.test/media/")


@pytest.mark.asyncio
async def test_write_persists_bytes_and_builds_public_url(storage: FilesystemStorage) -> None:
    stored = await storage.write("images", "uploads/u-1/1.png", io.BytesIO(b"pixels"))

    assert stored.byte_size == 6
    assert stored.url == "http://cdn.example.test/media/images/uploads/u-1/1.png"
    assert storage.path_for("images", "uploads/u-1/1.png").read_bytes() == b"pixels"


@pytest.mark.asyncio
async def test_write_refuses_to_overwrite_without_upsert(storage: FilesystemStorage) -> None:
    await storage.write("images", "a.png", io.BytesIO(b"one"))

    with pytest.raises(ObjectExistsError):
        await storage.write("images", "a.png", io.BytesIO(b"two"))

    replaced = await storage.write("images", "a.png", io.BytesIO(b"three"), upsert=True)
    assert replaced.byte_size == 5


@pytest.mark.asyncio
async def test_write_over_the_limit_leaves_nothing_behind(storage: FilesystemStorage) -> None:
    with pytest.raises(StorageLimitError) as excinfo:
        await storage.write("images", "big.png", io.BytesIO(b"x" * 10), max_bytes=4)

    assert excinfo.value.limit == 4
    assert not storage.path_for("images", "big.png").exists()


def test_keys_cannot_escape_the_base_directory(storage: FilesystemStorage) -> None:
    with pytest.raises(StorageError):
        storage.path_for("images", "../../etc/passwd")


@pytest.mark.asyncio
async def test_delete_is_idempotent(storage: FilesystemStorage) -> None:
    await storage.write("images", "gone.png", io.BytesIO(b"bye"))

    await storage.delete("images", "gone.png")
    await storage.delete("images", "gone.png")

    assert not storage.path_for("images", "gone.png").exists()
