from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from trendiwear_api.api.deps import get_uploads_service
from trendiwear_api.core.http import CurrentUser

from .exceptions import InvalidUploadError, UploadTooLargeError
from .schemas import UploadResult
from .service import UploadsService

router = APIRouter(tags=["uploads"])

UploadsServiceDep = Annotated[UploadsService, Depends(get_uploads_service)]


@router.post(
    "/upload",
    response_model=UploadResult,
    summary="Upload an image",
    responses={
        status.HTTP_400_BAD_REQUEST: {"description": "Unsupported file type or folder."},
        status.HTTP_413_REQUEST_ENTITY_TOO_LARGE: {"description": "File exceeds the limit."},
    },
)
async def upload_file(
    user: CurrentUser,
    service: UploadsServiceDep,
    *,
    file: Annotated[UploadFile, File(...)],
    folder: Annotated[str | None, Form(max_length=200)] = None,
) -> UploadResult:
    try:
        return await service.upload_image(user=user, upload=file, folder=folder)
    except UploadTooLargeError as exc:
        raise HTTPException(status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(exc)) from exc
    except InvalidUploadError as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


__all__ = ["router"]
