import logging

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st
from numpy.testing import assert_array_equal

from emboss.container_models import Canvas, Material, Setting
from emboss.container_models.base import Vector3, point
from emboss.renders.compositor import blend, draw, pixel_grid, shade, sight_vectors
from emboss.renders.reflection import Reflection
from emboss.shapes import Concave, Corn, RoundBox


def _reflection(diffuse: float, specular: float, alpha: float) -> Reflection:
    return Reflection(
        diffuse=np.array([diffuse]),
        specular=np.array([specular]),
        alpha=np.array([alpha]),
        footprint=np.array([True]),
    )


class TestShade:
    @pytest.mark.parametrize(
        ("reflection", "expected"),
        [
            pytest.param(_reflection(0.0, 0.0, 1.0), (204, 204, 204, 255), id="ambient only"),
            pytest.param(_reflection(0.0, 1.0, 1.0), (255, 255, 255, 255), id="saturated highlight"),
            pytest.param(_reflection(-10.0, 0.0, 1.0), (0, 0, 0, 255), id="negative light"),
            pytest.param(_reflection(0.0, 0.0, 0.5), (204, 204, 204, 127), id="half coverage"),
            pytest.param(_reflection(np.nan, 0.0, 1.0), (255, 255, 255, 255), id="nan saturates"),
        ],
    )
    def test_white_material(
        self,
        reflection: Reflection,
        expected: tuple,
        white: Material,
        setting: Setting,
    ) -> None:
        colors = shade(reflection, white, setting)

        assert colors.dtype == np.uint8
        assert tuple(colors[0]) == expected

    def test_highlight_is_white_on_dark_material(
        self, black: Material, setting: Setting
    ) -> None:
        colors = shade(_reflection(0.0, 0.9, 1.0), black, setting)

        # 255 * 0.9**7
        assert tuple(colors[0]) == (121, 121, 121, 255)


class TestBlend:
    @staticmethod
    def _px(*channels: int) -> np.ndarray:
        return np.array([channels], dtype=np.uint8)

    def test_transparent_foreground_keeps_background(self) -> None:
        background = self._px(10, 20, 30, 40)
        assert_array_equal(blend(background, self._px(200, 100, 0, 0)), background)

    def test_opaque_foreground_replaces_background(self) -> None:
        foreground = self._px(200, 100, 0, 255)
        assert_array_equal(blend(self._px(10, 20, 30, 40), foreground), foreground)

    @staticmethod
    def _single_precision_over(background: tuple, foreground: tuple) -> tuple:
        """One pixel of source-over in float32 scalars, truncated at the end."""
        top = np.float32(255)
        bg = [np.float32(c) / top for c in background]
        fg = [np.float32(c) / top for c in foreground]
        alpha = bg[3] + fg[3] - bg[3] * fg[3]
        rgb = [
            (f * fg[3] + b * bg[3] * (np.float32(1) - fg[3])) / alpha
            for f, b in zip(fg[:3], bg[:3])
        ]
        return tuple(int(top * c) for c in (*rgb, alpha))

    @pytest.mark.parametrize(
        ("background", "foreground"),
        [
            pytest.param((0, 0, 255, 255), (255, 0, 0, 128), id="over opaque"),
            pytest.param((0, 0, 0, 0), (200, 100, 50, 100), id="over empty"),
            pytest.param((0, 0, 0, 128), (255, 255, 255, 128), id="both half"),
            pytest.param((210, 204, 250, 170), (16, 108, 166, 156), id="alpha rounding"),
            pytest.param((144, 210, 13, 148), (144, 249, 209, 51), id="color rounding"),
        ],
    )
    def test_source_over(self, background: tuple, foreground: tuple) -> None:
        blended = blend(self._px(*background), self._px(*foreground))

        assert tuple(int(c) for c in blended[0]) == self._single_precision_over(
            background, foreground
        )

    @pytest.mark.parametrize(
        ("background", "foreground", "channel", "expected"),
        [
            pytest.param((210, 204, 250, 170), (16, 108, 166, 156), 3, 222, id="alpha"),
            pytest.param((144, 210, 13, 148), (144, 249, 209, 51), 0, 144, id="red"),
        ],
    )
    def test_rounds_in_single_precision(
        self, background: tuple, foreground: tuple, channel: int, expected: int
    ) -> None:
        blended = blend(self._px(*background), self._px(*foreground))

        assert blended[0, channel] == expected

    @given(
        background=st.tuples(*[st.integers(0, 255)] * 4),
        foreground=st.tuples(*[st.integers(0, 255)] * 3, st.integers(1, 254)),
    )
    def test_partial_alpha_matches_single_precision(
        self, background: tuple, foreground: tuple
    ) -> None:
        blended = blend(self._px(*background), self._px(*foreground))

        assert tuple(int(c) for c in blended[0]) == self._single_precision_over(
            background, foreground
        )

    def test_blends_many_pixels_at_once(self) -> None:
        # Arrange
        rng = np.random.default_rng(7)
        background = rng.integers(0, 256, size=(500, 4), dtype=np.uint8)
        foreground = rng.integers(0, 256, size=(500, 4), dtype=np.uint8)
        foreground[:, 3] = rng.integers(1, 255, size=500, dtype=np.uint8)

        # Act
        blended = blend(background, foreground)

        # Assert
        expected = [
            self._single_precision_over(tuple(map(int, b)), tuple(map(int, f)))
            for b, f in zip(background, foreground)
        ]
        assert_array_equal(blended, np.array(expected, dtype=np.uint8))


def test_sight_points_away_from_camera() -> None:
    grid = pixel_grid(300, 300)

    sight = sight_vectors(grid, 300, 300, 2000)

    assert (sight.x[150, 150], sight.y[150, 150], sight.z[150, 150]) == (0.0, 0.0, -1.0)
    assert sight.x[0, 0] < 0
    assert sight.y[0, 0] < 0
    assert np.allclose(sight.norm(), 1.0)


class TestDraw:
    def test_dial_rim_at_apex(
        self, canvas: Canvas, white: Material, setting: Setting
    ) -> None:
        draw(Corn(center=point(150, 150), radius=150, height=450), white, setting, canvas)

        assert canvas.pixel(150, 150) == (194, 194, 194, 255)

    def test_dish_at_center(
        self, canvas: Canvas, white: Material, setting: Setting
    ) -> None:
        draw(Concave(center=point(150, 150), radius=130, depth=30), white, setting, canvas)

        assert canvas.pixel(150, 150) == (219, 219, 219, 255)

    def test_slider_rim_top_is_flat(
        self, canvas: Canvas, white: Material, setting: Setting
    ) -> None:
        slider = RoundBox(
            top_left=point(50, 100),
            bottom_right=point(250, 100),
            border_radius=40,
            depth=-40,
        )

        draw(slider, white, setting, canvas)

        assert canvas.pixel(150, 100) == (219, 219, 219, 255)

    def test_pixels_outside_footprint_are_untouched(
        self, canvas: Canvas, blue: Material, setting: Setting
    ) -> None:
        # Arrange
        canvas.data[:] = (10, 20, 30, 40)
        dish = Concave(center=point(150, 150), radius=50, depth=10)
        xs, ys = np.meshgrid(np.arange(300), np.arange(300))
        outside = np.hypot(xs - 150, ys - 150) > 50

        # Act
        draw(dish, blue, setting, canvas)

        # Assert
        assert (canvas.data[outside] == (10, 20, 30, 40)).all()
        assert not (canvas.data[~outside] == (10, 20, 30, 40)).all()

    def test_shape_outside_canvas_draws_nothing(
        self, canvas: Canvas, white: Material, setting: Setting
    ) -> None:
        draw(Corn(center=point(-100, -100), radius=20, height=5), white, setting, canvas)

        assert not canvas.data.any()

    def test_opaque_pixels_are_stable_under_redraw(
        self, canvas: Canvas, blue: Material, setting: Setting
    ) -> None:
        # Arrange
        cone = Corn(center=point(150, 150), radius=120, height=100)
        draw(cone, blue, setting, canvas)
        first = canvas.data.copy()
        opaque = first[..., 3] == 255

        # Act
        draw(cone, blue, setting, canvas)

        # Assert
        assert opaque.any()
        assert_array_equal(canvas.data[opaque], first[opaque])

    def test_sequence_equals_sequential_draws(
        self, white: Material, setting: Setting
    ) -> None:
        # Arrange
        shapes = (
            Corn(center=point(150, 150), radius=150, height=450),
            Concave(center=point(150, 150), radius=130, depth=30),
            Concave(center=point(215, 85), radius=20, depth=-8),
        )
        together = Canvas.blank(300, 300)
        one_by_one = Canvas.blank(300, 300)

        # Act
        draw(shapes, white, setting, together)
        for shape in shapes:
            draw(shape, white, setting, one_by_one)

        # Assert
        assert together == one_by_one

    def test_nested_sequences_are_flattened(
        self, white: Material, setting: Setting
    ) -> None:
        a = Corn(center=point(100, 100), radius=60, height=30)
        b = Concave(center=point(180, 180), radius=60, depth=10)
        nested, flat = Canvas.blank(300, 300), Canvas.blank(300, 300)

        draw([a, [b]], white, setting, nested)
        draw((a, b), white, setting, flat)

        assert nested == flat

    def test_later_shapes_blend_over_earlier_ones(
        self, white: Material, black: Material, setting: Setting
    ) -> None:
        # Arrange
        cone = Corn(center=point(150, 150), radius=150, height=450)
        dish = Concave(center=point(150, 150), radius=60, depth=10)
        cone_first, dish_first = Canvas.blank(300, 300), Canvas.blank(300, 300)

        # Act
        draw(cone, white, setting, cone_first)
        draw(dish, black, setting, cone_first)
        draw(dish, black, setting, dish_first)
        draw(cone, white, setting, dish_first)

        # Assert
        assert cone_first.pixel(150, 150) != dish_first.pixel(150, 150)
        assert dish_first.pixel(150, 150) == (194, 194, 194, 255)

    @pytest.mark.parametrize(
        ("corner", "region"),
        [
            pytest.param(point(100, 100), lambda x, y: (x <= 100) & (y <= 100), id="top left"),
            pytest.param(point(200, 100), lambda x, y: (x >= 200) & (y <= 100), id="top right"),
            pytest.param(point(100, 150), lambda x, y: (x <= 100) & (y >= 150), id="bottom left"),
            pytest.param(point(200, 150), lambda x, y: (x >= 200) & (y >= 150), id="bottom right"),
        ],
    )
    def test_round_box_corners_match_concave(
        self, corner: Vector3, region, blue: Material, setting: Setting
    ) -> None:
        # Arrange
        box = RoundBox(
            top_left=point(100, 100),
            bottom_right=point(200, 150),
            border_radius=30,
            depth=12,
        )
        cap = Concave(center=corner, radius=30, depth=12)
        box_canvas, cap_canvas = Canvas.blank(300, 300), Canvas.blank(300, 300)
        ys, xs = np.mgrid[0:300, 0:300]
        mask = region(xs, ys)

        # Act
        draw(box, blue, setting, box_canvas)
        draw(cap, blue, setting, cap_canvas)

        # Assert
        assert box_canvas.data[mask].any()
        assert_array_equal(box_canvas.data[mask], cap_canvas.data[mask])

    def test_logs_each_shape(
        self, canvas: Canvas, white: Material, setting: Setting, caplog
    ) -> None:
        with caplog.at_level(logging.DEBUG):
            draw(
                [
                    Corn(center=point(5, 5), radius=1, height=1),
                    Concave(center=point(-50, 0), radius=1, depth=1),
                ],
                white,
                setting,
                canvas,
            )

        assert "Drawing Corn covering 5 pixel(s)" in caplog.text
        assert "Drawing Concave covering 0 pixel(s)" in caplog.text
