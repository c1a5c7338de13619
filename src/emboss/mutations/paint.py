"""Drawing as a canvas mutation."""

from collections.abc import Iterable
from typing import override

from returns.result import Result

from emboss.container_models.canvas import Canvas
from emboss.container_models.setting import Setting
from emboss.mutations.base import CanvasMutation
from emboss.objects import Object
from emboss.utils.logger import log_railway_function


class Paint(CanvasMutation):
    """Draw objects onto the canvas in the given order."""

    def __init__(self, objects: Iterable[Object], setting: Setting) -> None:
        self.objects = tuple(objects)
        self.setting = setting

    @property
    def skip_predicate(self) -> bool:
        return not self.objects

    @log_railway_function(
        "Failed to paint objects",
        "Successfully painted objects",
    )
    def __call__(self, canvas: Canvas) -> Result[Canvas, Exception]:
        return super().__call__(canvas)

    @override
    def apply_on_canvas(self, canvas: Canvas) -> Canvas:
        for drawable in self.objects:
            drawable.draw(self.setting, canvas)
        return canvas
