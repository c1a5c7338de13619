from functools import cached_property

import numpy as np
from pydantic import Field

from .base import ConfigBaseModel, Vector3


class LightSource(ConfigBaseModel):
    """
    Directional light given by angles instead of a vector.

    The frame is the image frame: x to the right, y down the image and z
    towards the viewer.
    """

    azimuth: float = Field(
        ...,
        description="Horizontal angle in degrees measured from the –x axis in the x–y plane. "
        "0° is –x direction, 90° is +y direction, 180° is +x direction.",
        examples=[90, 45, 180],
        ge=0,
        le=360,
    )
    elevation: float = Field(
        ...,
        description="Vertical angle in degrees measured from the x–y plane. "
        "0° is horizontal, +90° is straight in front of the image (+z).",
        examples=[90, 45, 10],
        ge=-90,
        le=90,
    )

    @cached_property
    def unit_vector(self) -> Vector3[float]:
        """Unit vector pointing from the surface towards the light."""
        azimuth = np.deg2rad(self.azimuth)
        elevation = np.deg2rad(self.elevation)
        return Vector3(
            float(-np.cos(azimuth) * np.cos(elevation)),
            float(np.sin(azimuth) * np.cos(elevation)),
            float(np.sin(elevation)),
        )

    @property
    def incident(self) -> Vector3[float]:
        """Direction the light travels in, as expected by `Setting.incident`."""
        return -self.unit_vector
