"""Video generation Pydantic models."""
from pydantic import Field

from common.models import CamelModel


class LongVideoJobResponse(CamelModel):
    """Response for an accepted long-video job. No further states are exposed."""
    success: bool = Field(True, description="Whether the job was accepted")
    message: str = Field(..., description="Status message")
    job_id: str = Field(..., description="Opaque identifier of the submitted job")
