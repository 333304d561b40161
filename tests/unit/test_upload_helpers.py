from __future__ import annotations

import pytest

from trendiwear_api.features.uploads.exceptions import InvalidUploadError, UploadTooLargeError
from trendiwear_api.features.uploads.service import file_extension, normalize_folder, object_key


def test_normalize_folder_defaults_and_trims_slashes() -> None:
    assert normalize_folder(None, default="uploads") == "uploads"
    assert normalize_folder("/products/covers/", default="uploads") == "products/covers"


@pytest.mark.parametrize("raw", ["../etc", "products/../../x", "with space", "a//b"])
def test_normalize_folder_rejects_unsafe_segments(raw: str) -> None:
    with pytest.raises(InvalidUploadError, match="Invalid folder name"):
        normalize_folder(raw, default="uploads")


def test_file_extension_prefers_the_filename() -> None:
    assert file_extension("Look.JPG", "image/png") == "jpg"
    assert file_extension(None, "image/png") == "png"


def test_object_key_layout() -> None:
    key = object_key(folder="products", user_id="u-1", extension="webp", now_ms=1700000000000)

    assert key == "products/u-1/1700000000000.webp"


def test_upload_too_large_message() -> None:
    error = UploadTooLargeError(limit=5 * 1024 * 1024, received=6 * 1024 * 1024)

    assert str(error) == "File too large. Maximum size is 5MB."
