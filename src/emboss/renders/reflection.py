from typing import NamedTuple

import numpy as np

from emboss.container_models.base import BinaryMask, FloatArray, Vector3
from emboss.shapes.base import Shape


class Reflection(NamedTuple):
    diffuse: FloatArray
    specular: FloatArray
    alpha: FloatArray
    footprint: BinaryMask


def reflect(
    shape: Shape,
    points: Vector3,
    incident: Vector3[float],
    sight: Vector3,
) -> Reflection:
    """
    Evaluate the Phong terms of a shape at the given points.

    - diffuse: ``-L · N``, not clamped, so surfaces facing away from the light
      go negative,
    - specular: ``max(0, R · -V)`` with ``R`` the mirrored light direction.

    :param shape: Surface to light.
    :param points: Query points in pixel coordinates (floats or arrays).
    :param incident: Direction the light travels in (towards the surface).
    :param sight: Unit viewing direction per point (from the camera).
    :returns: Diffuse, specular and coverage terms together with the footprint
              mask. Values outside the footprint are undefined.
    """
    normal, alpha, footprint = shape.sample(points)
    with np.errstate(invalid="ignore"):
        incidence = incident.dot(normal)
        reflected = (incident - normal * (2 * incidence)).normal()
        # fmax ignores NaN operands, like a float max.
        specular = np.fmax(reflected.dot(-sight), 0.0)
    return Reflection(-incidence, specular, alpha, footprint)


def reflect_point(
    shape: Shape,
    p: Vector3[float],
    incident: Vector3[float],
    sight: Vector3[float],
) -> tuple[float, float, float] | None:
    """Single point variant of :func:`reflect`; ``None`` outside the footprint."""
    diffuse, specular, alpha, footprint = reflect(shape, p, incident, sight)
    if not footprint:
        return None
    return float(diffuse), float(specular), float(alpha)
