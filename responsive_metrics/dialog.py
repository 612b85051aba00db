# responsive_metrics/dialog.py
"""
Dialog geometry with overflow prevention.

The guarantee this module keeps, for every button count it accepts:

    button_width * n + spacing * (n - 1) + horizontal_padding * 2 <= dialog_width

The per-button minimum width is honoured whenever a row of minimum-width
buttons still fits; when it does not, the fair share of the available width
wins, because a narrower button clips less than a row that spills out of the
dialog.
"""
import logging
from typing import Optional

from .breakpoints import classify
from .constants import (
    DEFAULT_TABLES,
    DIALOG_BUTTON_BUFFER,
    DIALOG_BUTTON_SPACING,
    DIALOG_INNER_PADDING_DEFAULT,
    DIALOG_INNER_PADDING_STEPS,
    DIALOG_OUTER_PADDING_DEFAULT,
    DIALOG_OUTER_PADDING_STEPS,
    DIALOG_VERTICAL_PADDING_RATIO,
)
from .errors import DialogOverflowError, InvalidButtonCountError, ResponsiveError
from .metrics import spacing as scaled_spacing
from .schemas import (
    ButtonConstraints,
    DialogGeometry,
    DialogPadding,
    ResponsiveTables,
    ViewportMetrics,
)

logger = logging.getLogger(__name__)


def _step(aspect_ratio: float, steps, default: float) -> float:
    for threshold, value in steps:
        if aspect_ratio > threshold:
            return value
    return default


def outer_padding_fraction(aspect_ratio: float) -> float:
    """Wider screens leave more room around the dialog; portrait screens less."""
    return _step(aspect_ratio, DIALOG_OUTER_PADDING_STEPS, DIALOG_OUTER_PADDING_DEFAULT)


def inner_padding_fraction(aspect_ratio: float) -> float:
    return _step(aspect_ratio, DIALOG_INNER_PADDING_STEPS, DIALOG_INNER_PADDING_DEFAULT)


def dialog_width(metrics: ViewportMetrics, tables: Optional[ResponsiveTables] = None) -> float:
    """
    Screen width minus an aspect-dependent outer padding on both sides,
    clamped to the category's [min_width, max_width].

    On viewports so narrow that min_width exceeds max_width the minimum wins.
    """
    tables = tables or DEFAULT_TABLES
    category = classify(metrics, tables)
    width = metrics.width

    min_padding = tables.dialog_min_padding.resolve(category)
    outer_padding = max(width * outer_padding_fraction(metrics.aspect_ratio), min_padding)
    raw_width = width - outer_padding * 2

    min_width = tables.dialog_min_width.resolve(category)
    max_width = width * tables.dialog_max_width_fraction.resolve(category)
    if min_width > max_width:
        logger.debug(f"Dialog min width {min_width} exceeds max {max_width:.1f} at width {width}; using min.")
    return max(min_width, min(raw_width, max_width))


def dialog_padding(metrics: ViewportMetrics, tables: Optional[ResponsiveTables] = None) -> DialogPadding:
    """Inner padding as a share of the dialog width, floored per category."""
    tables = tables or DEFAULT_TABLES
    category = classify(metrics, tables)
    min_padding = tables.dialog_min_padding.resolve(category)

    horizontal = max(dialog_width(metrics, tables) * inner_padding_fraction(metrics.aspect_ratio), min_padding)
    vertical = max(horizontal * DIALOG_VERTICAL_PADDING_RATIO, min_padding * DIALOG_VERTICAL_PADDING_RATIO)
    return DialogPadding(horizontal=horizontal, vertical=vertical)


def _resolve_spacing(metrics: ViewportMetrics, spacing: Optional[float],
                     tables: Optional[ResponsiveTables]) -> float:
    if spacing is None:
        return scaled_spacing(metrics, DIALOG_BUTTON_SPACING, tables)
    if spacing < 0:
        raise ResponsiveError(f"Button spacing cannot be negative, got {spacing}")
    return spacing


def dialog_button_width(metrics: ViewportMetrics, button_count: int, spacing: Optional[float] = None,
                        tables: Optional[ResponsiveTables] = None) -> float:
    """
    Width for each of `button_count` buttons laid out in one row.

    `spacing` defaults to the scaled 12-unit gap. Raises InvalidButtonCountError
    for fewer than one button and DialogOverflowError when the padding and gaps
    alone already fill the dialog. When only the per-button buffer does not fit,
    the buffer is dropped and the row is split evenly.
    """
    if isinstance(button_count, bool) or not isinstance(button_count, int) or button_count < 1:
        raise InvalidButtonCountError(f"button_count must be a positive integer, got {button_count!r}")

    tables = tables or DEFAULT_TABLES
    gap = _resolve_spacing(metrics, spacing, tables)
    width = dialog_width(metrics, tables)
    horizontal = dialog_padding(metrics, tables).horizontal

    # 4 units per button absorbs rounding in the layout layer.
    buffer = button_count * DIALOG_BUTTON_BUFFER
    row_space = width - horizontal * 2 - gap * (button_count - 1)
    if row_space <= 0:
        raise DialogOverflowError(
            f"{button_count} buttons with spacing {gap:.1f} cannot fit a dialog {width:.1f} wide"
        )
    available = row_space - buffer
    if available <= 0:
        logger.debug(f"No room for the {buffer:.0f} unit buffer; splitting {row_space:.1f} across {button_count} buttons.")
        return row_space / button_count

    share = available / button_count
    floor = tables.min_button_width.resolve(classify(metrics, tables))
    if share >= floor:
        return share
    if floor * button_count <= row_space:
        return floor
    logger.debug(f"Min button width {floor} would overflow {button_count} buttons; using share {share:.1f}.")
    return share


def dialog_action_constraints(metrics: ViewportMetrics, button_count: int, spacing: Optional[float] = None,
                              tables: Optional[ResponsiveTables] = None) -> ButtonConstraints:
    """Tight constraints pinning every action button to the computed width."""
    button_width = dialog_button_width(metrics, button_count, spacing, tables)
    return ButtonConstraints(min_width=button_width, max_width=button_width)


def dialog_geometry(metrics: ViewportMetrics, button_count: int = 1, spacing: Optional[float] = None,
                    tables: Optional[ResponsiveTables] = None) -> DialogGeometry:
    tables = tables or DEFAULT_TABLES
    gap = _resolve_spacing(metrics, spacing, tables)
    pad = dialog_padding(metrics, tables)
    return DialogGeometry(
        width=dialog_width(metrics, tables),
        horizontal_padding=pad.horizontal,
        vertical_padding=pad.vertical,
        button_width=dialog_button_width(metrics, button_count, gap, tables),
        button_count=button_count,
        spacing=gap,
    )
