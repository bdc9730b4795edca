"""Settings routes."""
from typing import Any

from fastapi import APIRouter, Body

from settings.models import KNOWN_SETTINGS, SettingsUpdateResponse
from utils.logger import get_logger

logger = get_logger("settings")
router = APIRouter(prefix="/api/settings", tags=["settings"])


@router.post("/update", response_model=SettingsUpdateResponse)
def update_settings(payload: Any = Body(None)):
    """
    Accept new settings and echo them back.

    Nothing is stored: each call only sees its own body. Any JSON value is
    echoed; an empty body echoes as an empty object.
    """
    if payload is None:
        payload = {}
    fields = payload if isinstance(payload, dict) else {}
    logger.info("Received new settings:")
    for key in KNOWN_SETTINGS:
        logger.info(f"- {key}: {fields.get(key)}")

    return SettingsUpdateResponse(
        success=True,
        message="Settings updated successfully.",
        current_settings=payload,
    )
