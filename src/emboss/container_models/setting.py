from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import AliasChoices, Field

from .base import ConfigBaseModel, Vector3

if TYPE_CHECKING:
    from emboss.settings import RenderSettings


class Setting(ConfigBaseModel):
    """Lighting and camera configuration shared by a whole draw pass."""

    incident: Vector3[float] = Field(
        ...,
        validation_alias=AliasChoices("incident", "incident_light"),
        description="Direction the light travels in, i.e. pointing towards the surface. "
        "Need not be normalized.",
        examples=[(0.2, 1.0, -0.2)],
    )
    ambient_brightness: float = Field(
        ...,
        description="Flat brightness added to the diffuse term.",
        examples=[0.8],
    )
    distance: int = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("distance", "camera_distance"),
        description="Distance in pixels of the virtual camera behind the image centre.",
        examples=[2000],
    )

    @classmethod
    def from_settings(cls, settings: RenderSettings) -> Setting:
        """Build a `Setting` from the environment driven defaults."""
        return cls(
            incident=Vector3(*settings.incident),
            ambient_brightness=settings.ambient_brightness,
            distance=settings.camera_distance,
        )
