"""
Canvas mutations.

Each mutation is a single step applied to a
:class:`~emboss.container_models.canvas.Canvas`; see :mod:`.base`.
"""

from .base import CanvasMutation
from .paint import Paint


__all__ = ["CanvasMutation", "Paint"]
