"""AI Image Generator - prompt-to-image front-end for the Pollinations service."""

__version__ = "0.1.0"

from imagegen.core.config import ImageGenConfig, config
from imagegen.core.image_url import build_image_url

__all__ = [
    "ImageGenConfig",
    "build_image_url",
    "config",
]
