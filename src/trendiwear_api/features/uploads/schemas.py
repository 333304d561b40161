from __future__ import annotations

from trendiwear_api.common.schema import BaseSchema


class UploadResult(BaseSchema):
    url: str
    path: str
    bucket: str
    provider: str
    success: bool = True


__all__ = ["UploadResult"]
