"""Image generation routes."""
from fastapi import APIRouter, Depends

from common.models import GenerationRequest, GenerationResult, parse_generation_request
from common.simulation import SimulationDelays, get_simulation_delays
from image.services import generate_image
from utils.logger import get_logger

logger = get_logger("image")
router = APIRouter(prefix="/api/generate", tags=["image"])


@router.post("/image", response_model=GenerationResult)
async def generate_image_endpoint(
    req: GenerationRequest = Depends(parse_generation_request),
    delays: SimulationDelays = Depends(get_simulation_delays),
):
    """
    Generate an image from a prompt.

    Every field is optional; missing aspectRatio / qualityMode fall back to
    their defaults. The response is held for the configured image delay.
    """
    result = await generate_image(req, delays.image)
    logger.info(f"Image generated: {result.result_url}")
    return result
