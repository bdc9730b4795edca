"""Assets module."""
from assets.services import describe_upload

__all__ = ["describe_upload"]
