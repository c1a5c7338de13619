from emboss.container_models.base import ConfigBaseModel
from emboss.container_models.canvas import Canvas
from emboss.container_models.material import Material
from emboss.container_models.setting import Setting
from emboss.renders.compositor import Drawable, draw, iter_shapes
from emboss.shapes.base import Shape


class Object(ConfigBaseModel):
    """A shape, or shapes drawn in order, with the material they share."""

    shape: Shape | tuple[Shape, ...]
    material: Material

    def draw(self, setting: Setting, canvas: Canvas) -> None:
        draw(self.shape, self.material, setting, canvas)


def with_material(shape: Drawable, material: Material) -> Object:
    """Pair a shape or an (arbitrarily nested) sequence of shapes with a material."""
    if not isinstance(shape, Shape):
        shape = tuple(iter_shapes(shape))
    return Object(shape=shape, material=material)
