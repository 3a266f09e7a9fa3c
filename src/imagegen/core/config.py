"""Configuration management for the AI Image Generator.

This module provides centralized configuration management using Pydantic Settings.
All configuration is loaded from environment variables with the IMAGEGEN_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Environment variables (IMAGEGEN_* prefix)
2. .env file in the project root
3. Default values defined in ImageGenConfig

Example .env file:
    IMAGEGEN_IMAGE_SERVICE_URL=https://image.pollinations.ai/prompt
    IMAGEGEN_IMAGE_WIDTH=1024
    IMAGEGEN_IMAGE_HEIGHT=1024
    IMAGEGEN_SERVER_PORT=7860

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
This ensures a single source of truth for all configuration values across
the application.

Usage Example
-------------
    from imagegen.core.config import config

    print(config.image_service_url)
    print(config.image_width, config.image_height)

    # Configuration is immutable after initialization
    # To change values, set environment variables and restart
"""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Package-relative asset directories.  Both ship inside the wheel.
PACKAGE_DIR = Path(__file__).resolve().parent.parent


class ImageGenConfig(BaseSettings):
    """Main configuration for the AI Image Generator.

    Values are loaded from environment variables with the IMAGEGEN_ prefix,
    with fallback to defaults defined here.

    Attributes
    ----------
    Upstream Image Service:
        image_service_url : str
            Base URL of the prompt endpoint; the encoded prompt is appended
            as the next path segment
        image_width : int
            Requested image width in pixels (64-2048)
        image_height : int
            Requested image height in pixels (64-2048)
        nologo : bool
            Ask the service to omit its watermark

    Server Settings:
        server_host : str
            Server bind address (0.0.0.0 for local network)
        server_port : int
            Server port (1024-65535)
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root logging level applied by the ``imagegen`` entry point

    Paths:
        static_dir : Path
            CSS and JavaScript served under ``/static``
        templates_dir : Path
            Directory holding ``index.html``

    Examples
    --------
        >>> custom_config = ImageGenConfig(image_width=512, image_height=768)
        >>> custom_config.image_width
        512
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="IMAGEGEN_",
        case_sensitive=False,
    )

    # Upstream image service
    image_service_url: str = Field(
        default="https://image.pollinations.ai/prompt",
        description="Base URL of the upstream prompt-to-image endpoint",
    )
    image_width: int = Field(default=1024, ge=64, le=2048)
    image_height: int = Field(default=1024, ge=64, le=2048)
    nologo: bool = Field(
        default=True,
        description="Request images without the service watermark",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for local network)",
    )
    server_port: int = Field(
        default=7860,
        description="Server port",
        ge=1024,
        le=65535,
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level for the server process",
    )

    # Paths
    static_dir: Path = Field(
        default=PACKAGE_DIR / "static",
        description="Directory of static frontend assets",
    )
    templates_dir: Path = Field(
        default=PACKAGE_DIR / "templates",
        description="Directory containing index.html",
    )


# Global configuration instance
# Loads values from environment variables (IMAGEGEN_* prefix) and .env file.
config = ImageGenConfig()
