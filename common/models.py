"""Shared request and response models for the generation API."""
from typing import Any, Optional
from fastapi import Body
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_ASPECT_RATIO = "16:9"
DEFAULT_QUALITY_MODE = "Standard"
NO_AVATAR = "none"


def loose_str(value: Any) -> Optional[str]:
    """
    Read a loosely typed request value as text.

    Strings pass through and numbers are stringified. Anything else (booleans,
    objects, arrays) is treated as absent so the field falls back to its default.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


class CamelModel(BaseModel):
    """Base model exposing camelCase on the wire while accepting snake_case too."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class LooseRequest(CamelModel):
    """Request body that never fails validation: every field is optional text."""

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_loose(cls, value: Any) -> Optional[str]:
        return loose_str(value)

    @classmethod
    def from_body(cls, payload: Any):
        """Build from any decoded JSON body; non-objects give all defaults."""
        if isinstance(payload, dict):
            return cls.model_validate(payload)
        return cls()


class GenerationRequest(LooseRequest):
    """Loosely typed generation request; every field is optional."""
    prompt: Optional[str] = Field(None, description="Text prompt")
    aspect_ratio: Optional[str] = Field(None, description=f"Aspect ratio, defaults to {DEFAULT_ASPECT_RATIO}")
    quality_mode: Optional[str] = Field(None, description=f"Quality mode, defaults to {DEFAULT_QUALITY_MODE}")
    avatar_id: Optional[str] = Field(None, description="Optional avatar ID for character consistency")

    @property
    def resolved_aspect_ratio(self) -> str:
        return self.aspect_ratio or DEFAULT_ASPECT_RATIO

    @property
    def resolved_quality_mode(self) -> str:
        return self.quality_mode or DEFAULT_QUALITY_MODE


def parse_generation_request(payload: Any = Body(None)) -> GenerationRequest:
    """FastAPI dependency reading any JSON body as a GenerationRequest."""
    return GenerationRequest.from_body(payload)


class GenerationMetadata(CamelModel):
    """Parameters the simulated generation ran with."""
    aspect_ratio: str = Field(..., description="Aspect ratio used")
    quality_mode: str = Field(..., description="Quality mode used")
    prompt: Optional[str] = Field(None, description="Prompt as received")
    model: str = Field(..., description="Simulated model name")
    avatar_used: str = Field(NO_AVATAR, description="Avatar ID used, or 'none'")


class GenerationResult(CamelModel):
    """Response for synchronous generation endpoints."""
    success: bool = Field(True, description="Whether generation succeeded")
    message: str = Field(..., description="Status message")
    result_url: str = Field(..., description="Opaque locator of the generated artifact")
    metadata: GenerationMetadata
