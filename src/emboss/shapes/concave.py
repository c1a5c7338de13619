import numpy as np
from pydantic import Field

from emboss.container_models.base import FloatArray, Vector3
from .base import Shape, SurfaceSample, radial_coverage


def cap_sample(offset: Vector3[FloatArray], radius: float, depth: float) -> SurfaceSample:
    """
    Sample a spherical cap of planar radius `radius` and sagitta `depth`.

    The sphere radius follows from the chord: ``r = |depth| + y0`` with
    ``y0 = (radius² - depth²) / (2|depth|)``. A positive depth is a dish, a
    negative depth a dome. ``depth == 0`` is the flat limit of both.

    :param offset: Query points relative to the cap centre.
    """
    distance = offset.norm()
    coverage = radial_coverage(radius, distance)
    footprint = distance <= radius
    if depth == 0:
        flat = np.zeros_like(distance)
        return SurfaceSample(Vector3(flat, flat, flat + 1.0), coverage, footprint)

    y0 = (radius**2 - depth**2) / (2 * abs(depth))
    sphere_radius = abs(depth) + y0
    theta = np.arcsin(distance / sphere_radius)
    sign = -depth / abs(depth)
    normal = Vector3(
        sign * offset.x, sign * offset.y, sphere_radius * np.cos(theta)
    ).normal()
    return SurfaceSample(normal, coverage, footprint)


class Concave(Shape):
    """Spherical dish (positive depth) or dome (negative depth) over a disc."""

    center: Vector3[float] = Field(..., description="Centre of the disc.")
    radius: float = Field(..., ge=0, description="Radius of the disc in pixels.")
    depth: float = Field(
        ..., description="Sagitta of the cap; positive is concave, negative convex."
    )

    def compute_sample(self, points: Vector3[FloatArray]) -> SurfaceSample:
        return cap_sample(points - self.center, self.radius, self.depth)
