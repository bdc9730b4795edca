"""Upload processing services."""
from typing import Optional

from assets.models import FileInfo
from common.error_messages import ApiError, ErrorCode
from utils.identifiers import UPLOADED_FILE_PREFIX, generate_id
from utils.logger import get_logger

logger = get_logger("assets.services")

DEFAULT_MIME_TYPE = "application/octet-stream"


def describe_upload(filename: Optional[str], data: bytes, content_type: Optional[str]) -> FileInfo:
    """
    Describe an uploaded payload held in memory.

    Raises:
        ApiError: MISSING_UPLOAD_FILE when the payload is empty
    """
    if not data:
        raise ApiError(ErrorCode.MISSING_UPLOAD_FILE, detail=f"empty file part {filename!r}")

    name = filename or "upload"
    logger.info(f"File received: {name}, Size: {len(data)} bytes")
    return FileInfo(
        name=name,
        size=len(data),
        mime_type=content_type or DEFAULT_MIME_TYPE,
        resource_id=generate_id(UPLOADED_FILE_PREFIX),
    )
