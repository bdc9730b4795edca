"""Upload routes."""
from typing import Optional

from fastapi import APIRouter, File, UploadFile

from assets.models import UploadResponse
from assets.services import describe_upload
from common.error_messages import ApiError, ErrorCode
from utils.logger import get_logger

logger = get_logger("assets.routes")
router = APIRouter(prefix="/api", tags=["assets"])


@router.post("/upload", response_model=UploadResponse)
async def upload_file(file: Optional[UploadFile] = File(None)):
    """
    Accept a single file in the multipart field ``file``.

    The payload is read into memory for the duration of the request and
    never written to disk. A request without a file part gets a 400.
    """
    if file is None:
        raise ApiError(ErrorCode.MISSING_UPLOAD_FILE)

    try:
        data = await file.read()
    finally:
        await file.close()

    file_info = describe_upload(file.filename, data, file.content_type)
    return UploadResponse(
        success=True,
        message="File upload processed successfully!",
        file_info=file_info,
    )
