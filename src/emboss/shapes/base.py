"""
Surface abstraction
===================

Every shape answers one question: *what does the surface look like at this
point of the image plane?* The answer is a :class:`SurfaceSample`:

- ``normal``: unit surface normal, pointing away from the surface towards
  the viewer side (+z),
- ``coverage``: soft-edge weight ``min(1, radius - distance)``; 0 on the
  outline and 1 from one pixel inside,
- ``footprint``: whether the point lies on the shape at all.

Query points are a :class:`~emboss.container_models.base.Vector3` whose
components are either floats or arrays of one common shape. Points outside
the footprint carry meaningless (possibly NaN) normals and coverage; callers
must mask them with ``footprint``.
"""

from abc import ABC, abstractmethod
from typing import NamedTuple

import numpy as np

from emboss.container_models.base import (
    BinaryMask,
    ConfigBaseModel,
    FloatArray,
    Vector3,
)


class SurfaceSample(NamedTuple):
    normal: Vector3[FloatArray]
    coverage: FloatArray
    footprint: BinaryMask


class Shape(ConfigBaseModel, ABC):
    """A flat footprint with an analytic height profile."""

    def sample(self, points: Vector3) -> SurfaceSample:
        """
        Sample the surface at the given points.

        :param points: Query points in pixel coordinates. Components may be
            floats or equally shaped arrays; z is ignored by the footprint.
        :returns: Normals, coverage and footprint with the shape of the points.
        """
        points = Vector3(*(np.asarray(c, dtype=np.float64) for c in points))
        # Normals outside the footprint may be NaN and are masked by the caller.
        with np.errstate(invalid="ignore", divide="ignore"):
            return self.compute_sample(points)

    @abstractmethod
    def compute_sample(self, points: Vector3[FloatArray]) -> SurfaceSample:
        """Closed-form normals and coverage; implemented per shape."""

    def normal_vec(self, p: Vector3[float]) -> tuple[Vector3[float], float] | None:
        """
        Normal and coverage at a single point.

        :returns: ``(normal, coverage)``, or ``None`` when ``p`` is outside the
            footprint.
        """
        normal, coverage, footprint = self.sample(p)
        if not footprint:
            return None
        return Vector3(*(float(c) for c in normal)), float(coverage)


def radial_coverage(radius: float, distance: FloatArray) -> FloatArray:
    """Anti-aliasing weight fading linearly to 0 over the outermost pixel."""
    return np.fmin(radius - distance, 1.0)
