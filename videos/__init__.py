"""Video generation module."""
from videos.services import generate_short_video, start_long_video_job, cancel_background_jobs

__all__ = [
    "generate_short_video",
    "start_long_video_job",
    "cancel_background_jobs",
]
