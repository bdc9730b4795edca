"""Avatar generation module."""
from avatars.models import AvatarRequest, AvatarResponse
from avatars.services import generate_avatar

__all__ = ["AvatarRequest", "AvatarResponse", "generate_avatar"]
