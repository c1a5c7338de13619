"""Pixel buffer the shapes are drawn onto.

::

    +--------------------------------------+
    |               Canvas                 |
    |--------------------------------------|
    | data   : ImageRGBA (H, W, 4) uint8   |
    | height : int (rows)                  |
    | width  : int (columns)               |
    +--------------------------------------+
    | blank(width, height) -> cls          |
    | from_image(image) -> cls             |
    | image -> PIL.Image.Image             |
    | pixel(x, y) -> Rgba                  |
    +--------------------------------------+

The canvas is owned by the caller. Drawing writes into `data` in place, so
the array is never replaced by the renderer.
"""

from __future__ import annotations

import numpy as np
from PIL.Image import Image, fromarray
from pydantic import BaseModel, ConfigDict

from .base import ImageRGBA
from .material import Rgba


class Canvas(BaseModel):
    data: ImageRGBA

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra="forbid",
    )

    @property
    def height(self) -> int:
        """Return the height (number of rows) of the canvas."""
        return self.data.shape[0]

    @property
    def width(self) -> int:
        """Return the width (number of columns) of the canvas."""
        return self.data.shape[1]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return np.array_equal(self.data, other.data)

    @classmethod
    def blank(cls, width: int, height: int) -> Canvas:
        """Fully transparent black canvas."""
        return cls(data=np.zeros((height, width, 4), dtype=np.uint8))

    @classmethod
    def from_image(cls, image: Image) -> Canvas:
        """Copy a Pillow image into a new canvas, converting it to RGBA."""
        return cls(data=np.array(image.convert("RGBA"), dtype=np.uint8))

    @property
    def image(self) -> Image:
        return fromarray(self.data)

    def pixel(self, x: int, y: int) -> Rgba:
        return Rgba(*(int(channel) for channel in self.data[y, x]))
