"""Pydantic models for avatar generation."""
from typing import Any, Optional
from fastapi import Body
from pydantic import Field

from common.models import CamelModel, LooseRequest


class AvatarRequest(LooseRequest):
    """Avatar training request. Loosely typed: extra fields are accepted and ignored."""
    name: Optional[str] = Field(None, description="User-friendly avatar name")
    file_name: Optional[str] = Field(None, description="Name of the uploaded source image")


def parse_avatar_request(payload: Any = Body(None)) -> AvatarRequest:
    """FastAPI dependency reading any JSON body as an AvatarRequest."""
    return AvatarRequest.from_body(payload)


class AvatarResponse(CamelModel):
    """Response model for avatar generation."""
    success: bool = Field(True, description="Whether generation succeeded")
    message: str = Field(..., description="Success message")
    avatar_id: str = Field(..., description="Unique avatar identifier")
    avatar_url: str = Field(..., description="URL of the generated avatar image")
