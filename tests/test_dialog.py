"""
Dialog geometry tests.

The 375x667 phone is the reference: outer padding 30, dialog width 315,
inner padding 16 horizontal / 12.8 vertical.
"""
import pytest

from responsive_metrics import (
    DEFAULT_TABLES,
    ButtonConstraints,
    DialogOverflowError,
    InvalidButtonCountError,
    ResponsiveError,
    ViewportMetrics,
    classify,
)
from responsive_metrics.dialog import (
    dialog_action_constraints,
    dialog_button_width,
    dialog_geometry,
    dialog_padding,
    dialog_width,
    inner_padding_fraction,
    outer_padding_fraction,
)


class TestFractions:

    @pytest.mark.parametrize("aspect,expected", [
        (0.5, 0.08), (1.0, 0.08), (1.2, 0.10), (1.5, 0.10), (1.7, 0.12), (2.0, 0.12), (2.1, 0.15),
    ])
    def test_outer(self, aspect, expected):
        assert outer_padding_fraction(aspect) == expected

    @pytest.mark.parametrize("aspect,expected", [
        (0.5, 0.05), (1.5, 0.05), (1.6, 0.06), (2.0, 0.06), (2.1, 0.08),
    ])
    def test_inner(self, aspect, expected):
        assert inner_padding_fraction(aspect) == expected


class TestDialogWidth:

    def test_reference_phone(self, iphone_se):
        assert dialog_width(iphone_se) == pytest.approx(315.0)

    def test_capped_at_max_fraction(self, full_hd):
        # raw width 1920 - 2 * 230.4 = 1459.2 exceeds 65% of the screen
        assert dialog_width(full_hd) == pytest.approx(1248.0)

    def test_min_padding_floor(self):
        # 8% of 180 is 14.4, below the mobile floor of 16; raw width falls under min width
        assert dialog_width(ViewportMetrics(width=180, height=400)) == 280.0

    def test_min_width_wins_on_narrow_viewports(self):
        # raw 252 < min 280, and max is only 270
        assert dialog_width(ViewportMetrics(width=300, height=600)) == 280.0


class TestDialogPadding:

    def test_reference_phone(self, iphone_se):
        pad = dialog_padding(iphone_se)
        assert pad.horizontal == pytest.approx(16.0)
        assert pad.vertical == pytest.approx(12.8)

    def test_wide_screen_uses_percentage(self, full_hd):
        pad = dialog_padding(full_hd)
        assert pad.horizontal == pytest.approx(1248 * 0.06)
        assert pad.vertical == pytest.approx(1248 * 0.06 * 0.8)


class TestButtonWidth:

    def test_two_buttons_reference(self, iphone_se):
        width = dialog_button_width(iphone_se, 2, spacing=12)
        assert width == pytest.approx(131.5)
        assert width * 2 + 12 + 32 == pytest.approx(307.5)

    def test_default_spacing_is_scaled(self, iphone_se):
        expected = (315 - 32 - 12 * 0.92 - 8) / 2
        assert dialog_button_width(iphone_se, 2) == pytest.approx(expected)

    def test_floor_applies_when_it_still_fits(self):
        # share is (280 - 32 - 44 - 8) / 2 = 98, but two 100-wide buttons use 276 of 280
        metrics = ViewportMetrics(width=300, height=600)
        assert dialog_button_width(metrics, 2, spacing=44) == 100.0

    def test_overflow_guard_beats_floor(self, iphone_se):
        # three 100-wide buttons would need 356 of 315, so the fair share wins
        width = dialog_button_width(iphone_se, 3, spacing=12)
        assert width == pytest.approx((315 - 32 - 24 - 12) / 3)
        assert width * 3 + 24 + 32 <= 315

    def test_single_button_takes_row(self, full_hd):
        assert dialog_button_width(full_hd, 1, spacing=0) == pytest.approx(1248 - 2 * 74.88 - 4)

    @pytest.mark.parametrize("count", [0, -1, 2.5, True])
    def test_invalid_counts(self, iphone_se, count):
        with pytest.raises(InvalidButtonCountError):
            dialog_button_width(iphone_se, count)

    def test_negative_spacing(self, iphone_se):
        with pytest.raises(ResponsiveError, match="cannot be negative"):
            dialog_button_width(iphone_se, 2, spacing=-1)

    def test_row_that_cannot_fit_raises(self, iphone_se):
        # 315 - 32 - 12 * 24 leaves nothing for 25 buttons
        with pytest.raises(DialogOverflowError):
            dialog_button_width(iphone_se, 25, spacing=12)
        with pytest.raises(DialogOverflowError):
            dialog_button_width(iphone_se, 30, spacing=12)

    def test_buffer_dropped_when_only_it_overflows(self, iphone_se):
        # 20 buttons leave a 55-wide row, less than their 80 units of buffer
        width = dialog_button_width(iphone_se, 20, spacing=12)
        assert width == pytest.approx(55 / 20)
        assert width * 20 + 12 * 19 + 32 == pytest.approx(315)

    def test_constraints_are_tight(self, iphone_se):
        constraints = dialog_action_constraints(iphone_se, 2, spacing=12)
        assert constraints == ButtonConstraints(min_width=131.5, max_width=131.5)


class TestGeometry:

    def test_aggregate(self, iphone_se):
        geometry = dialog_geometry(iphone_se, button_count=2, spacing=12)
        assert geometry.width == pytest.approx(315.0)
        assert geometry.horizontal_padding == pytest.approx(16.0)
        assert geometry.vertical_padding == pytest.approx(12.8)
        assert geometry.button_width == pytest.approx(131.5)
        assert geometry.row_width == pytest.approx(307.5)
        assert geometry.fits


class TestProperties:

    def test_no_overflow(self, viewport_grid):
        for metrics in viewport_grid:
            for count in range(1, 7):
                try:
                    geometry = dialog_geometry(metrics, count)
                except DialogOverflowError:
                    continue
                assert geometry.row_width <= geometry.width + 1e-9, (metrics, count)

    def test_button_floor_whenever_it_fits(self, viewport_grid):
        for metrics in viewport_grid:
            floor = DEFAULT_TABLES.min_button_width.resolve(classify(metrics))
            for count in range(1, 5):
                geometry = dialog_geometry(metrics, count, spacing=12)
                floor_row = floor * count + 12 * (count - 1) + geometry.horizontal_padding * 2
                if floor_row <= geometry.width:
                    assert geometry.button_width >= floor, (metrics, count)

    def test_width_within_category_bounds(self, viewport_grid):
        for metrics in viewport_grid:
            category = classify(metrics)
            min_width = DEFAULT_TABLES.dialog_min_width.resolve(category)
            max_width = metrics.width * DEFAULT_TABLES.dialog_max_width_fraction.resolve(category)
            width = dialog_width(metrics)
            if min_width <= max_width:
                assert min_width <= width <= max_width, metrics
            else:
                assert width == min_width

    def test_deterministic(self, iphone_se):
        assert dialog_geometry(iphone_se, 2) == dialog_geometry(iphone_se, 2)
