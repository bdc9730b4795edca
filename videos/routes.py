"""Video generation routes."""
from fastapi import APIRouter, Depends, status

from common.models import GenerationRequest, GenerationResult, parse_generation_request
from common.simulation import SimulationDelays, get_simulation_delays
from utils.logger import get_logger
from videos.models import LongVideoJobResponse
from videos.services import generate_short_video, start_long_video_job

logger = get_logger("videos")
router = APIRouter(prefix="/api/generate", tags=["videos"])


@router.post("/short-video", response_model=GenerationResult)
async def generate_short_video_endpoint(
    req: GenerationRequest = Depends(parse_generation_request),
    delays: SimulationDelays = Depends(get_simulation_delays),
):
    """Generate a short video. Held for the configured short-video delay."""
    result = await generate_short_video(req, delays.short_video)
    logger.info(f"Short video generated: {result.result_url}")
    return result


@router.post(
    "/long-video",
    response_model=LongVideoJobResponse,
    status_code=status.HTTP_202_ACCEPTED,
)
async def generate_long_video_endpoint(
    req: GenerationRequest = Depends(parse_generation_request),
    delays: SimulationDelays = Depends(get_simulation_delays),
):
    """
    Submit a long video job.

    Returns 202 with a job id right away. The job runs detached and its
    completion is only visible in the server logs; there is no status endpoint.
    """
    job_id = start_long_video_job(req, delays.long_video)
    return LongVideoJobResponse(
        success=True,
        message="Long video generation started.",
        job_id=job_id,
    )
