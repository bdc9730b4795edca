"""Image generation module."""
from image.services import generate_image

__all__ = ["generate_image"]
