"""
Immutable value models shared by the shapes, the renderer and the callers.

Configuration (`Material`, `Setting`, `LightSource`) is validated by pydantic
on construction and frozen afterwards. `Vector3` is a plain value type whose
components may also be numpy arrays, so the same arithmetic serves a single
point and a whole pixel grid. `Canvas` is the one mutable model: the caller's
RGBA pixel buffer.
"""

from .base import Vector3, point
from .canvas import Canvas
from .light_source import LightSource
from .material import Material, Rgba
from .setting import Setting


__all__ = [
    "Canvas",
    "LightSource",
    "Material",
    "Rgba",
    "Setting",
    "Vector3",
    "point",
]
