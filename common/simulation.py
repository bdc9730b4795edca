"""Simulated latency and result locators for the mock generation backend."""
import asyncio

from pydantic import BaseModel, Field

from common.models import GenerationMetadata, GenerationRequest, GenerationResult, NO_AVATAR
from config import Config
from utils.logger import get_logger
from utils.identifiers import generate_id

logger = get_logger("simulation")


class SimulationDelays(BaseModel):
    """Artificial latency, in seconds, per kind of generation."""
    image: float = Field(0.0, ge=0)
    short_video: float = Field(0.0, ge=0)
    long_video: float = Field(0.0, ge=0)
    avatar: float = Field(0.0, ge=0)


def get_simulation_delays() -> SimulationDelays:
    """
    FastAPI dependency providing the configured delays (overridden in tests).

    Negative values are clamped to zero so one bad setting cannot fail
    every delayed endpoint.
    """
    delays = {}
    for name, value in Config.delays().items():
        if value < 0:
            logger.warning(f"Negative {name} delay {value}s configured, using 0")
            value = 0.0
        delays[name] = value
    return SimulationDelays(**delays)


async def simulate_latency(seconds: float) -> None:
    """Hold the current request without blocking the event loop."""
    if seconds > 0:
        await asyncio.sleep(seconds)


def build_result_url(kind: str, extension: str) -> str:
    """Fresh locator such as ``https://generated-content-cdn.com/image-<id>.png``."""
    base = Config.CONTENT_CDN_URL.rstrip("/")
    return f"{base}/{generate_id(kind)}.{extension}"


def build_job_result_url(job_id: str, extension: str = "mp4") -> str:
    """Locator a finished detached job would have produced."""
    base = Config.CONTENT_CDN_URL.rstrip("/")
    return f"{base}/{job_id}.{extension}"


def build_avatar_url(avatar_id: str) -> str:
    base = Config.AVATAR_CDN_URL.rstrip("/")
    return f"{base}/{avatar_id}.png"


async def run_simulated_generation(
    label: str,
    kind: str,
    extension: str,
    model: str,
    req: GenerationRequest,
    delay: float,
) -> GenerationResult:
    """
    Wait for the configured delay, then describe a fabricated artifact.

    Args:
        label: Human readable name used in the response message ("Image")
        kind: Slug used in the result locator ("image", "short-video")
        extension: File extension of the locator
        model: Simulated model name reported in metadata
        req: Incoming generation request, defaults applied here
        delay: Seconds to hold the response

    Returns:
        GenerationResult with a freshly computed locator
    """
    logger.info(f"Simulating {kind} generation. Prompt: {req.prompt!r}")
    await simulate_latency(delay)

    return GenerationResult(
        success=True,
        message=f"{label} generated successfully!",
        result_url=build_result_url(kind, extension),
        metadata=GenerationMetadata(
            aspect_ratio=req.resolved_aspect_ratio,
            quality_mode=req.resolved_quality_mode,
            prompt=req.prompt,
            model=model,
            avatar_used=req.avatar_id or NO_AVATAR,
        ),
    )
