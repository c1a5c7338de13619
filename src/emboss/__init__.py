"""
Procedural shading of flat vector shapes as lit, embossed surfaces.

Build shapes, pair them with a material and draw them onto a canvas::

    from emboss import Canvas, Concave, Corn, Material, Setting, point, with_material

    setting = Setting(incident=(0.2, 1.0, -0.2), ambient_brightness=0.8, distance=2000)
    white = Material(color=(255, 255, 255, 255), shininess=7, reflection_brightness=1.0)

    canvas = Canvas.blank(300, 300)
    with_material(Corn(center=point(150, 150), radius=150, height=450), white).draw(
        setting, canvas
    )
    canvas.image.save("dial.png")
"""

from .container_models import (
    Canvas,
    LightSource,
    Material,
    Rgba,
    Setting,
    Vector3,
    point,
)
from .mutations import Paint
from .objects import Object, with_material
from .renders import draw, load_canvas, save_canvas
from .settings import RenderSettings, get_settings
from .shapes import Concave, Corn, RoundBox, Shape


__all__ = [
    "Canvas",
    "Concave",
    "Corn",
    "LightSource",
    "Material",
    "Object",
    "Paint",
    "RenderSettings",
    "Rgba",
    "RoundBox",
    "Setting",
    "Shape",
    "Vector3",
    "draw",
    "get_settings",
    "load_canvas",
    "point",
    "save_canvas",
    "with_material",
]
