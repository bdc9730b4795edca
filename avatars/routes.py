"""Avatar generation API routes."""
from fastapi import APIRouter, Depends

from avatars.models import AvatarRequest, AvatarResponse, parse_avatar_request
from avatars.services import generate_avatar
from common.simulation import SimulationDelays, get_simulation_delays
from utils.logger import get_logger

logger = get_logger("avatars.routes")
router = APIRouter(prefix="/api/generate", tags=["avatars"])


@router.post("/avatar", response_model=AvatarResponse)
async def generate_avatar_endpoint(
    req: AvatarRequest = Depends(parse_avatar_request),
    delays: SimulationDelays = Depends(get_simulation_delays),
):
    """
    Generate an avatar.

    Args:
        req: {name, fileName}; both optional

    Returns:
        Avatar id and URL, after the configured avatar delay
    """
    avatar = await generate_avatar(req, delays.avatar)
    logger.info(f"Avatar generated: {avatar.avatar_id}")
    return avatar
