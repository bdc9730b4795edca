"""Settings update Pydantic models."""
from typing import Any
from pydantic import Field

from common.models import CamelModel

# Fields the client usually sends; anything else is echoed as well.
KNOWN_SETTINGS = ("aspectRatio", "qualityMode", "autoSound", "autoSpeech")


class SettingsUpdateResponse(CamelModel):
    """Response model for a settings update."""
    success: bool = Field(True, description="Whether the update was accepted")
    message: str = Field(..., description="Status message")
    current_settings: Any = Field(..., description="The submitted settings, verbatim")
