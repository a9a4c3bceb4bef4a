"""Tests for grid geometry, pulse placement and rendering."""

import logging
import math

import numpy as np
import pytest

from pulsar_plots.errors import InvalidLayout
from pulsar_plots.layout import Grid, draw_layout, grid, layout, render
from pulsar_plots.model import Alpha, AlphaSize, Shape, Size
from pulsar_plots.surface import FillCircle, FillRect, FillRoundedRect


class TestGrid:
    def test_cell_side_limited_by_rows(self):
        g = grid(7, row_count=7, padding=0, canvas_size=(280, 280))
        assert g.column_count == 1
        assert g.cell_side == pytest.approx(40.0)

    def test_cell_side_limited_by_columns(self):
        g = grid(365, row_count=7, padding=2, canvas_size=(530, 140))
        assert g.column_count == 53
        assert g.cell_side == pytest.approx(530 / 53 - 2)

    def test_column_count_rounds_up(self):
        assert grid(8, row_count=7, canvas_size=(100, 100)).column_count == 2
        assert grid(14, row_count=7, canvas_size=(100, 100)).column_count == 2

    def test_empty_grid(self):
        g = grid(0, row_count=7, padding=0, canvas_size=(70, 70))
        assert g.column_count == 0
        assert g.cell_side == pytest.approx(10.0)

    def test_pitch(self):
        g = grid(7, row_count=7, padding=4, canvas_size=(280, 280))
        assert g.pitch == pytest.approx(g.cell_side + 4)


class TestPreconditions:
    def test_row_start_equal_to_row_count(self):
        with pytest.raises(InvalidLayout) as exc_info:
            layout([0.5], row_count=7, row_start=7, canvas_size=(100, 100))
        assert exc_info.value.details["row_start"] == 7
        assert exc_info.value.details["row_count"] == 7

    def test_row_start_above_row_count(self):
        with pytest.raises(InvalidLayout):
            layout([0.5], row_count=3, row_start=5, canvas_size=(100, 100))

    def test_negative_row_start(self):
        with pytest.raises(InvalidLayout):
            layout([0.5], row_start=-1, canvas_size=(100, 100))

    def test_zero_row_count(self):
        with pytest.raises(InvalidLayout):
            layout([0.5], row_count=0, canvas_size=(100, 100))

    def test_negative_padding(self):
        with pytest.raises(InvalidLayout):
            layout([0.5], padding=-1, canvas_size=(100, 100))

    @pytest.mark.parametrize("size", [(0, 100), (100, 0), (-5, 10)])
    def test_non_positive_canvas(self, size):
        with pytest.raises(InvalidLayout):
            layout([0.5], canvas_size=size)

    @pytest.mark.parametrize("padding", [math.nan, math.inf])
    def test_non_finite_padding(self, surface, padding):
        with pytest.raises(InvalidLayout):
            render(surface, [0.5, 0.6], Shape.SQUARE, "red", padding=padding, canvas_size=(100, 100))
        assert surface.commands == []

    @pytest.mark.parametrize("size", [(math.inf, math.inf), (math.nan, 100), (100, math.inf)])
    def test_non_finite_canvas(self, surface, size):
        with pytest.raises(InvalidLayout):
            render(surface, [0.5, 0.6], Shape.SQUARE, "red", canvas_size=size)
        assert surface.commands == []

    def test_nested_values_rejected(self):
        with pytest.raises(InvalidLayout):
            layout([[0.1, 0.2]], canvas_size=(100, 100))

    def test_invalid_layout_is_value_error(self):
        with pytest.raises(ValueError):
            layout([0.5], row_count=7, row_start=7, canvas_size=(100, 100))

    def test_render_emits_nothing_on_invalid_layout(self, surface):
        with pytest.raises(InvalidLayout):
            render(surface, [0.1, 0.2, 0.3], row_count=7, row_start=7, canvas_size=(100, 100))
        assert surface.commands == []


class TestPlacement:
    def test_empty_values(self, surface):
        result = render(surface, [], canvas_size=(100, 100))
        assert len(result) == 0
        assert surface.commands == []

    def test_single_value_offset(self):
        result = layout([0.5], row_count=7, row_start=3, padding=4, canvas_size=(280, 280))
        (pulse,) = result.pulses
        side = result.grid.cell_side
        assert pulse.offset == pytest.approx((2.0, 3 * (side + 4) + 2.0))

    @pytest.mark.parametrize("row_count", [1, 2, 5, 7])
    def test_wrap_invariant(self, row_count):
        for row_start in range(row_count):
            result = layout(
                np.linspace(0, 1, 20),
                row_count=row_count,
                row_start=row_start,
                padding=3,
                canvas_size=(400, 200),
            )
            pitch = result.grid.pitch
            for i, pulse in enumerate(result):
                assert pulse.index == i
                assert pulse.row == (row_start + i) % row_count
                assert pulse.column == (row_start + i) // row_count
                assert pulse.offset == pytest.approx(
                    (pulse.column * pitch + 1.5, pulse.row * pitch + 1.5)
                )

    def test_order_preserved(self):
        values = [0.9, 0.1, 0.5, 0.3]
        result = layout(values, canvas_size=(100, 100))
        assert [p.value for p in result] == values

    def test_scenario_eight_values_wrap_to_second_column(self):
        result = layout([0.5] * 8, row_count=7, padding=0, canvas_size=(280, 280))
        assert result.grid.column_count == 2
        assert (result.pulses[6].row, result.pulses[6].column) == (6, 0)
        assert (result.pulses[7].row, result.pulses[7].column) == (0, 1)
        side = result.grid.cell_side
        assert result.pulses[7].offset == pytest.approx((side, 0.0))

    def test_every_pulse_shares_cell_side(self):
        result = layout(np.linspace(0, 1, 30), canvas_size=(300, 70))
        assert {p.side for p in result} == {result.grid.cell_side}

    def test_styles_resolved_per_pulse(self):
        result = layout([0.0, 0.5, 1.0], AlphaSize(Alpha(max=0.6), Size(1.8)), canvas_size=(100, 100))
        assert [p.alpha for p in result] == pytest.approx([0.0, 0.3, 0.6])
        assert [p.size_scale for p in result] == pytest.approx([0.0, 0.9, 1.8])

    def test_style_may_be_given_by_name(self):
        result = layout([0.5], "size:2", canvas_size=(100, 100))
        assert result.pulses[0].alpha == 1.0
        assert result.pulses[0].size_scale == pytest.approx(1.0)

    def test_accepts_numpy_arrays(self):
        result = layout(np.array([0.2, 0.4]), canvas_size=(100, 100))
        assert len(result) == 2


class TestRender:
    @pytest.mark.parametrize("shape,kind", [
        (Shape.CIRCLE, FillCircle),
        (Shape.SQUARE, FillRect),
        (Shape.SQUIRCLE, FillRoundedRect),
    ])
    def test_count_and_kind(self, surface, shape, kind):
        values = np.linspace(0, 1, 50)
        render(surface, values, shape, "red", canvas_size=(500, 100))
        assert len(surface.commands) == 50
        assert all(isinstance(c, kind) for c in surface.commands)

    def test_scenario_single_column_alpha(self, surface, ramp):
        result = render(
            surface, ramp, Shape.SQUARE, "red", Alpha(),
            row_count=7, row_start=0, padding=0, canvas_size=(280, 280),
        )
        assert result.grid.cell_side == pytest.approx(40.0)
        for row, (command, value) in enumerate(zip(surface.commands, ramp)):
            assert command.top_left == pytest.approx((0.0, row * 40.0))
            assert command.size == pytest.approx((40.0, 40.0))
            assert command.alpha == pytest.approx(value)
            assert command.color == "red"

    def test_scenario_single_column_circles(self, surface, ramp):
        render(
            surface, ramp, Shape.CIRCLE, "red", Alpha(),
            row_count=7, padding=0, canvas_size=(280, 280),
        )
        for row, (command, value) in enumerate(zip(surface.commands, ramp)):
            assert command.center == pytest.approx((20.0, row * 40.0 + 20.0))
            assert command.radius == pytest.approx(20.0)
            assert command.alpha == pytest.approx(value)

    def test_shape_by_name(self, surface):
        render(surface, [0.5], "circle", canvas_size=(100, 100))
        assert isinstance(surface.commands[0], FillCircle)

    def test_color_passed_through(self, surface):
        color = (0.1, 0.2, 0.3, 0.4)
        render(surface, [0.5, 0.6], Shape.SQUIRCLE, color, canvas_size=(100, 100))
        assert all(c.color is color for c in surface.commands)

    def test_draw_layout_reuses_result(self, surface, ramp):
        result = layout(ramp, canvas_size=(280, 280))
        draw_layout(surface, result, Shape.SQUARE, "blue")
        draw_layout(surface, result, Shape.SQUARE, "blue")
        assert len(surface.commands) == 14
        assert surface.commands[:7] == surface.commands[7:]


class TestDegenerateGeometry:
    def test_non_finite_cell_side_is_degenerate(self):
        g = Grid(count=1, row_count=7, row_start=0, column_count=1, padding=0.0, cell_side=math.nan)
        assert g.degenerate

    def test_flagged_and_nothing_drawn(self, surface, caplog):
        with caplog.at_level(logging.WARNING, logger="pulsar_plots.layout"):
            result = render(surface, [0.5] * 14, padding=4, canvas_size=(10, 10))
        assert result.degenerate
        assert result.grid.cell_side <= 0
        assert surface.commands == []
        assert "too small" in caplog.text

    def test_empty_degenerate_layout_is_silent(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pulsar_plots.layout"):
            layout([], padding=20, canvas_size=(10, 10))
        assert caplog.text == ""
