"""Environment driven rendering defaults."""

from functools import lru_cache
from typing import Annotated

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RenderSettings(BaseSettings):
    """
    Default lighting and camera configuration.

    Settings can be configured via:

    1. Environment variables (e.g., EMBOSS_AMBIENT_BRIGHTNESS=0.6)
    2. .env file in the working directory
    3. Default values defined below

    .. rubric:: Examples

    Set the light direction via environment::

        export EMBOSS_INCIDENT='[0.0, 1.0, -1.0]'
        export EMBOSS_CAMERA_DISTANCE=1500
    """

    incident: Annotated[
        tuple[float, float, float],
        Field(
            default=(0.2, 1.0, -0.2),
            description="Direction the light travels in (towards the surface)",
        ),
    ]
    ambient_brightness: Annotated[
        float,
        Field(default=0.8, description="Flat brightness added to the diffuse term"),
    ]
    camera_distance: Annotated[
        int,
        Field(
            default=2000,
            description="Camera distance behind the image centre in pixels",
            gt=0,
        ),
    ]

    model_config = SettingsConfigDict(
        env_prefix="EMBOSS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )

    def log_config(self) -> None:
        """Log the active rendering defaults."""
        logger.info("Rendering configuration:")
        logger.info(f"  Incident light: {self.incident}")
        logger.info(f"  Ambient brightness: {self.ambient_brightness}")
        logger.info(f"  Camera distance: {self.camera_distance}px")


@lru_cache
def get_settings() -> RenderSettings:
    """
    Get the cached settings instance.

    :return: The rendering settings read once from the environment.
    """
    return RenderSettings()
