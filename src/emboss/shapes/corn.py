from pydantic import Field

from emboss.container_models.base import FloatArray, Vector3
from .base import Shape, SurfaceSample, radial_coverage


class Corn(Shape):
    """
    Right cone over a disc.

    The normal is the slant ``(height, 0, radius)`` turned towards the query
    point, so a positive height tilts the surface outwards (a raised cone) and
    a negative height tilts it inwards (a funnel). At the apex there is no
    direction to turn to and the slant keeps its canonical +x orientation.
    """

    center: Vector3[float] = Field(..., description="Apex position in the image plane.")
    radius: float = Field(..., ge=0, description="Radius of the base disc in pixels.")
    height: float = Field(
        ..., description="Signed apex offset; the sign selects raised or sunken."
    )

    def compute_sample(self, points: Vector3[FloatArray]) -> SurfaceSample:
        offset = points - self.center
        distance = offset.norm()
        slant = Vector3(self.height, 0.0, self.radius)
        return SurfaceSample(
            normal=slant.rot_xy(offset).normal(),
            coverage=radial_coverage(self.radius, distance),
            footprint=distance <= self.radius,
        )
