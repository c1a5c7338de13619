from collections.abc import Iterable, Iterator
from typing import Final

import numpy as np
from loguru import logger

from emboss.container_models.base import FloatArray, ImageRGBA, Vector3
from emboss.container_models.canvas import Canvas
from emboss.container_models.material import Material
from emboss.container_models.setting import Setting
from emboss.shapes.base import Shape
from .reflection import Reflection, reflect

DIFFUSE_WEIGHT: Final[float] = 0.3
CHANNEL_MAX: Final[float] = 255.0

type Drawable = Shape | Iterable[Drawable]


def pixel_grid(width: int, height: int) -> Vector3[FloatArray]:
    """Pixel coordinates of every pixel as query points in the z = 0 plane."""
    ys, xs = np.mgrid[0:height, 0:width].astype(np.float64)
    return Vector3(xs, ys, np.zeros_like(xs))


def sight_vectors(
    grid: Vector3[FloatArray], width: int, height: int, distance: int
) -> Vector3[FloatArray]:
    """Unit rays from a camera `distance` pixels behind the image centre."""
    return Vector3(
        grid.x - width / 2,
        grid.y - height / 2,
        np.full_like(grid.x, -float(distance)),
    ).normal()


def _to_channels(values: FloatArray) -> ImageRGBA:
    """Truncate to 8 bits; NaN and negative values become 0."""
    values = np.nan_to_num(values, nan=0.0)
    return np.clip(values, 0.0, CHANNEL_MAX).astype(np.uint8)


def shade(reflection: Reflection, material: Material, setting: Setting) -> ImageRGBA:
    """
    Turn the Phong terms into RGBA colours.

    The colour channels are the material colour scaled by the diffuse light
    plus a white highlight; the alpha channel is the material alpha scaled by
    the coverage.

    :returns: RGBA array with the shape of the reflection terms plus a channel axis.
    """
    diffuse = DIFFUSE_WEIGHT * reflection.diffuse + setting.ambient_brightness
    highlight = (
        material.reflection_brightness
        * CHANNEL_MAX
        * reflection.specular**material.shininess
    )
    red, green, blue, alpha = material.color
    rgb = (
        np.array([red, green, blue], dtype=np.float64) * diffuse[..., np.newaxis]
        + highlight[..., np.newaxis]
    )
    rgba = np.concatenate([rgb, (alpha * reflection.alpha)[..., np.newaxis]], axis=-1)
    # fmin ignores a NaN operand, so a NaN channel saturates to 255.
    return _to_channels(np.fmin(rgba, CHANNEL_MAX))


def blend(background: ImageRGBA, foreground: ImageRGBA) -> ImageRGBA:
    """
    Composite `foreground` over `background` (source-over), pixel by pixel.

    A transparent foreground leaves the background untouched and an opaque one
    replaces it. Both arrays have shape ``(..., 4)``.
    """
    # Single precision throughout, truncated once at the end.
    channel_max = np.float32(CHANNEL_MAX)
    bg = background.astype(np.float32) / channel_max
    fg = foreground.astype(np.float32) / channel_max
    bg_alpha, fg_alpha = bg[..., 3:], fg[..., 3:]

    out_alpha = bg_alpha + fg_alpha - bg_alpha * fg_alpha
    visible = out_alpha != 0
    out_rgb = (fg[..., :3] * fg_alpha + bg[..., :3] * bg_alpha * (1 - fg_alpha)) / (
        np.where(visible, out_alpha, np.float32(1))
    )
    blended = _to_channels(
        channel_max * np.concatenate([out_rgb, out_alpha], axis=-1)
    )

    blended = np.where(visible, blended, background)
    blended = np.where(foreground[..., 3:] == 255, foreground, blended)
    return np.where(foreground[..., 3:] == 0, background, blended)


def iter_shapes(shapes: Drawable) -> Iterator[Shape]:
    """Shapes of a drawable in drawing order, flattening nested iterables."""
    if isinstance(shapes, Shape):
        yield shapes
        return
    for member in shapes:
        yield from iter_shapes(member)


def _draw_shape(
    shape: Shape, material: Material, setting: Setting, canvas: Canvas
) -> None:
    grid = pixel_grid(canvas.width, canvas.height)
    sight = sight_vectors(grid, canvas.width, canvas.height, setting.distance)
    reflection = reflect(shape, grid, setting.incident, sight)
    footprint = reflection.footprint
    logger.debug(
        f"Drawing {type(shape).__name__} covering {int(footprint.sum())} pixel(s)"
    )
    if not footprint.any():
        return
    colors = shade(reflection, material, setting)
    canvas.data[footprint] = blend(canvas.data[footprint], colors[footprint])


def draw(
    shapes: Drawable, material: Material, setting: Setting, canvas: Canvas
) -> None:
    """
    Draw one shape, or a sequence of shapes in order, onto the canvas in place.

    Every pixel inside a shape's footprint is lit and blended over the current
    pixel value; pixels outside all footprints are left unchanged. Later shapes
    blend over earlier ones.

    :param shapes: A shape or an (arbitrarily nested) iterable of shapes that
        share the material.
    :param material: Colour, shininess and highlight strength.
    :param setting: Light direction, ambient brightness and camera distance.
    :param canvas: Pixel buffer that is modified in place.
    """
    for shape in iter_shapes(shapes):
        _draw_shape(shape, material, setting, canvas)
