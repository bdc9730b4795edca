"""Video generation services - simulated short videos and detached long-video jobs."""
import asyncio
from typing import Set

from common.models import GenerationRequest, GenerationResult
from common.simulation import build_job_result_url, run_simulated_generation, simulate_latency
from config import Config
from utils.identifiers import LONG_VIDEO_JOB_PREFIX, generate_id
from utils.logger import get_logger

logger = get_logger("videos.services")

# Strong references to running jobs; the event loop only keeps weak ones.
_background_jobs: Set[asyncio.Task] = set()


async def generate_short_video(req: GenerationRequest, delay: float) -> GenerationResult:
    """Produce a fabricated short video result after ``delay`` seconds."""
    return await run_simulated_generation(
        label="Short video",
        kind="short-video",
        extension="mp4",
        model=Config.VIDEO_MODEL,
        req=req,
        delay=delay,
    )


async def _run_long_video_job(job_id: str, req: GenerationRequest, delay: float) -> None:
    """Background body of a long-video job. Its outcome is only logged."""
    logger.info(
        f"Long video job {job_id} running "
        f"(aspect ratio: {req.resolved_aspect_ratio}, quality: {req.resolved_quality_mode})"
    )
    await simulate_latency(delay)
    logger.info(f"Job {job_id} completed. Result URL: {build_job_result_url(job_id)}")


def start_long_video_job(req: GenerationRequest, delay: float) -> str:
    """
    Schedule a detached long-video job on the running event loop.

    The caller gets the job id back immediately and never awaits the job.

    Args:
        req: Generation request the job was submitted with
        delay: Seconds the simulated job takes

    Returns:
        The new job id
    """
    job_id = generate_id(LONG_VIDEO_JOB_PREFIX)
    logger.info(f"Starting asynchronous job: {job_id}. Prompt: {req.prompt!r}")

    task = asyncio.get_running_loop().create_task(
        _run_long_video_job(job_id, req, delay), name=job_id
    )
    _background_jobs.add(task)
    task.add_done_callback(_background_jobs.discard)
    return job_id


def pending_job_count() -> int:
    """Number of long-video jobs still running."""
    return len(_background_jobs)


async def cancel_background_jobs() -> int:
    """Cancel every running long-video job (used at shutdown). Returns how many were cancelled."""
    tasks = [task for task in _background_jobs if not task.done()]
    for task in tasks:
        task.cancel()
    if tasks:
        await asyncio.gather(*tasks, return_exceptions=True)
        logger.info(f"Cancelled {len(tasks)} pending long video job(s)")
    return len(tasks)
