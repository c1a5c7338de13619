import numpy as np
from pydantic import Field

from emboss.container_models.base import FloatArray, Vector3
from .base import Shape, SurfaceSample
from .concave import cap_sample


def _clamp(value: FloatArray, low: float, high: float) -> FloatArray:
    # Inclusive on the low side and exclusive on the high side.
    return np.where(value <= low, low, np.where(value < high, value, high))


class RoundBox(Shape):
    """
    Rectangle with a rolled rim.

    Every point is evaluated as a spherical cap of radius `border_radius`
    centred on the nearest point of the rectangle spanned by the two corners.
    Inside the rectangle that point is the query itself, which gives a flat
    top; along the edges and around the corners the cap rolls the rim over.
    The rectangle may be degenerate, so a line gives a rounded bar and a point
    a plain cap.
    """

    top_left: Vector3[float]
    bottom_right: Vector3[float]
    border_radius: float = Field(..., ge=0, description="Width of the rim in pixels.")
    depth: float = Field(
        ..., description="Sagitta of the rim; positive is sunken, negative raised."
    )

    def rim_anchor(self, points: Vector3[FloatArray]) -> Vector3[FloatArray]:
        """Nearest point of the rectangle, one axis at a time."""
        return Vector3(
            _clamp(points.x, self.top_left.x, self.bottom_right.x),
            _clamp(points.y, self.top_left.y, self.bottom_right.y),
            0.0,
        )

    def compute_sample(self, points: Vector3[FloatArray]) -> SurfaceSample:
        return cap_sample(
            points - self.rim_anchor(points), self.border_radius, self.depth
        )
