"""Upload Pydantic models."""
from pydantic import Field

from common.models import CamelModel


class FileInfo(CamelModel):
    """Description of a file received in memory. Nothing is stored."""
    name: str = Field(..., description="Original file name")
    size: int = Field(..., gt=0, description="Payload size in bytes")
    mime_type: str = Field(..., description="Declared MIME type")
    resource_id: str = Field(..., description="Identifier generated for this upload")


class UploadResponse(CamelModel):
    """Response model for file upload."""
    success: bool = Field(True, description="Whether the upload was processed")
    message: str = Field(..., description="Status message")
    file_info: FileInfo
