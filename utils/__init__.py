"""Utils module."""
from utils.identifiers import (
    AVATAR_PREFIX,
    LONG_VIDEO_JOB_PREFIX,
    UPLOADED_FILE_PREFIX,
    generate_id,
)
from utils.logger import setup_logger, get_logger, app_logger

__all__ = [
    "AVATAR_PREFIX",
    "LONG_VIDEO_JOB_PREFIX",
    "UPLOADED_FILE_PREFIX",
    "generate_id",
    "setup_logger",
    "get_logger",
    "app_logger"
]
