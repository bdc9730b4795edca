"""Avatar generation services."""
from avatars.models import AvatarRequest, AvatarResponse
from common.simulation import build_avatar_url, simulate_latency
from utils.identifiers import AVATAR_PREFIX, generate_id
from utils.logger import get_logger

logger = get_logger("avatars.services")


async def generate_avatar(req: AvatarRequest, delay: float) -> AvatarResponse:
    """
    Fabricate an avatar after ``delay`` seconds.

    The id is allocated once the wait is over, so concurrent requests still
    receive distinct ids.
    """
    logger.info(f"Generating avatar '{req.name}' from file {req.file_name}")
    await simulate_latency(delay)

    avatar_id = generate_id(AVATAR_PREFIX)
    return AvatarResponse(
        success=True,
        message="Avatar generated successfully!",
        avatar_id=avatar_id,
        avatar_url=build_avatar_url(avatar_id),
    )
