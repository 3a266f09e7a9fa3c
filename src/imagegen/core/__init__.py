"""Core functionality for the image generator.

- **ImageGenConfig**: Configuration management using Pydantic Settings
- **config**: Global configuration instance (loads from environment variables)
- **build_image_url**: Builds the upstream image URL for a prompt

Nothing in this package performs network I/O.  The upstream image service is
only ever addressed by URL, and the browser fetches the image itself.
"""

from imagegen.core.config import ImageGenConfig, config
from imagegen.core.image_url import build_image_url, current_seed, encode_prompt

__all__ = [
    "ImageGenConfig",
    "build_image_url",
    "config",
    "current_seed",
    "encode_prompt",
]
