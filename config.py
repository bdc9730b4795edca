"""
Configuration module - loads all settings from environment variables.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
try:
    load_dotenv()
except Exception as e:
    print(f"Warning: Failed to load .env file: {e}")
    print("Continuing with environment variables or defaults...")


class Config:
    """Application configuration loaded from environment variables."""

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Safely parse integer environment variable."""
        try:
            return int(os.getenv(key, str(default)))
        except (ValueError, TypeError) as e:
            print(f"Warning: Invalid integer for {key}, using default {default}: {e}")
            return default

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        """Safely parse float environment variable."""
        try:
            return float(os.getenv(key, str(default)))
        except (ValueError, TypeError) as e:
            print(f"Warning: Invalid float for {key}, using default {default}: {e}")
            return default

    # Simulated latency (seconds)
    IMAGE_DELAY_SECONDS: float = _get_float.__func__("IMAGE_DELAY_SECONDS", 5.0)
    SHORT_VIDEO_DELAY_SECONDS: float = _get_float.__func__("SHORT_VIDEO_DELAY_SECONDS", 5.0)
    LONG_VIDEO_DELAY_SECONDS: float = _get_float.__func__("LONG_VIDEO_DELAY_SECONDS", 20.0)
    AVATAR_DELAY_SECONDS: float = _get_float.__func__("AVATAR_DELAY_SECONDS", 3.0)

    # Result locators
    CONTENT_CDN_URL: str = os.getenv("CONTENT_CDN_URL", "https://generated-content-cdn.com")
    AVATAR_CDN_URL: str = os.getenv("AVATAR_CDN_URL", "https://avatar-cdn.com")

    # Simulated models reported in generation metadata
    IMAGE_MODEL: str = os.getenv("IMAGE_MODEL", "horizons-image-sim-1")
    VIDEO_MODEL: str = os.getenv("VIDEO_MODEL", "horizons-video-sim-1")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = _get_int.__func__("PORT", 3000)

    @classmethod
    def delays(cls) -> dict:
        """Configured delays keyed by generation kind."""
        return {
            "image": cls.IMAGE_DELAY_SECONDS,
            "short_video": cls.SHORT_VIDEO_DELAY_SECONDS,
            "long_video": cls.LONG_VIDEO_DELAY_SECONDS,
            "avatar": cls.AVATAR_DELAY_SECONDS,
        }

    @classmethod
    def validate(cls) -> None:
        """Validate configuration values."""
        if not 0 < cls.PORT < 65536:
            raise ValueError(f"PORT must be between 1 and 65535, got {cls.PORT}")
        for name, value in cls.delays().items():
            if value < 0:
                raise ValueError(f"{name} delay must not be negative, got {value}")
