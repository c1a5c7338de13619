"""
Canvas Mutations
================

A :class:`CanvasMutation` is one step that modifies a
:class:`~emboss.container_models.canvas.Canvas` in place and hands it on.
Calling a mutation returns a `returns` `Result`, so several steps chain on
the success track with ``bind`` and stop at the first failure::

    from returns.pipeline import flow
    from returns.pointfree import bind

    result = flow(
        Canvas.blank(300, 300),
        Paint([rim, top], setting),
        bind(Paint([tip], setting)),
    )

All parameters of a mutation are provided via its constructor.
"""

from abc import ABC, abstractmethod

from returns.result import safe

from emboss.container_models.canvas import Canvas


class CanvasMutation(ABC):
    @property
    def skip_predicate(self) -> bool:
        """
        Determines whether this mutation should be skipped.

        :return bool:
            - `True`  → skip `apply_on_canvas`
            - `False` → apply the mutation
        """
        return False

    @safe
    def __call__(self, canvas: Canvas) -> Canvas:
        """
        Callable interface used by pipelines.

        If `skip_predicate` is `True`, the canvas is returned unchanged.
        Otherwise, `apply_on_canvas` is executed.
        """
        if self.skip_predicate:
            return canvas
        return self.apply_on_canvas(canvas)

    @abstractmethod
    def apply_on_canvas(self, canvas: Canvas) -> Canvas:
        """
        Apply the mutation to the given canvas.

        :param canvas: The canvas to be modified in place.
        :return Canvas: The same canvas.
        """
