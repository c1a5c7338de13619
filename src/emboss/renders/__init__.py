"""
Lighting and compositing of the analytic shapes.

- :mod:`.reflection` evaluates the Phong terms (diffuse, specular, coverage)
  of a shape at a set of points.
- :mod:`.compositor` turns those terms into RGBA colours with a material and
  blends them over a :class:`~emboss.container_models.canvas.Canvas` in place.
- :mod:`.image_io` moves canvases to and from image files, returning
  `IOResult` containers.

All per-pixel work is vectorised with numpy over the whole canvas.
"""

from .compositor import blend, draw, shade
from .image_io import load_canvas, save_canvas
from .reflection import Reflection, reflect, reflect_point


__all__ = (
    "Reflection",
    "blend",
    "draw",
    "load_canvas",
    "reflect",
    "reflect_point",
    "save_canvas",
    "shade",
)
