"""Image generation services - simulated, no real model is called."""
from common.models import GenerationRequest, GenerationResult
from common.simulation import run_simulated_generation
from config import Config


async def generate_image(req: GenerationRequest, delay: float) -> GenerationResult:
    """Produce a fabricated image result after ``delay`` seconds."""
    return await run_simulated_generation(
        label="Image",
        kind="image",
        extension="png",
        model=Config.IMAGE_MODEL,
        req=req,
        delay=delay,
    )
