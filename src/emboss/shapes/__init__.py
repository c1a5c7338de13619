"""
Shape catalog.

Each shape is a frozen pydantic model implementing
:meth:`~emboss.shapes.base.Shape.compute_sample` in closed form:

- :class:`Corn`: cone over a disc,
- :class:`Concave`: spherical dish or dome over a disc,
- :class:`RoundBox`: rectangle with a rolled rim, built from spherical caps.
"""

from .base import Shape, SurfaceSample
from .concave import Concave
from .corn import Corn
from .round_box import RoundBox


__all__ = ["Concave", "Corn", "RoundBox", "Shape", "SurfaceSample"]
