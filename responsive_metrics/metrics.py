# responsive_metrics/metrics.py
"""
Base design values -> device-adjusted runtime values.

Every kind multiplies by the same scale factor. Elevation reads more
prominently at larger scales (x1.2) and line height grows more conservatively
than font size (x0.9). Nothing here clamps; clamping lives in dialog.py where
overflow matters.
"""
from typing import Dict, Optional

from .breakpoints import classify
from .constants import (
    CONTENT_TOP_PADDING,
    DEFAULT_TABLES,
    ELEVATION_MULTIPLIER,
    EXPANDED_HEIGHT,
    LINE_HEIGHT_MULTIPLIER,
    SECTION_SPACING,
    TOOLBAR_HEIGHT,
)
from .scaling import scale_factor as _scale_factor
from .schemas import EdgeInsets, MetricKind, ResponsiveTables, ViewportMetrics

KIND_MULTIPLIERS: Dict[MetricKind, float] = {
    MetricKind.ELEVATION: ELEVATION_MULTIPLIER,
    MetricKind.LINE_HEIGHT: LINE_HEIGHT_MULTIPLIER,
}


def transform(metrics: ViewportMetrics, base_value: float, kind: MetricKind,
              tables: Optional[ResponsiveTables] = None) -> float:
    """Scale `base_value` for the given metric kind."""
    return base_value * _scale_factor(metrics, tables=tables) * KIND_MULTIPLIERS.get(kind, 1.0)


def font_size(metrics: ViewportMetrics, base_size: float, scale_factor: Optional[float] = None,
              tables: Optional[ResponsiveTables] = None) -> float:
    """Scaled font size. An explicit `scale_factor` bypasses the computed one."""
    if scale_factor is not None:
        return base_size * scale_factor
    return transform(metrics, base_size, MetricKind.FONT, tables)


def spacing(metrics: ViewportMetrics, base_spacing: float,
            tables: Optional[ResponsiveTables] = None) -> float:
    return transform(metrics, base_spacing, MetricKind.SPACING, tables)


def icon_size(metrics: ViewportMetrics, base_size: float,
              tables: Optional[ResponsiveTables] = None) -> float:
    return transform(metrics, base_size, MetricKind.ICON, tables)


def border_radius(metrics: ViewportMetrics, base_radius: float,
                  tables: Optional[ResponsiveTables] = None) -> float:
    return transform(metrics, base_radius, MetricKind.RADIUS, tables)


def border_width(metrics: ViewportMetrics, base_width: float,
                 tables: Optional[ResponsiveTables] = None) -> float:
    return transform(metrics, base_width, MetricKind.BORDER_WIDTH, tables)


def elevation(metrics: ViewportMetrics, base_elevation: float,
              tables: Optional[ResponsiveTables] = None) -> float:
    return transform(metrics, base_elevation, MetricKind.ELEVATION, tables)


def line_height(metrics: ViewportMetrics, base_height: float,
                tables: Optional[ResponsiveTables] = None) -> float:
    return transform(metrics, base_height, MetricKind.LINE_HEIGHT, tables)


def button_height(metrics: ViewportMetrics, base_height: float,
                  tables: Optional[ResponsiveTables] = None) -> float:
    return transform(metrics, base_height, MetricKind.BUTTON_HEIGHT, tables)


def card_height(metrics: ViewportMetrics, base_height: float,
                tables: Optional[ResponsiveTables] = None) -> float:
    return transform(metrics, base_height, MetricKind.CARD_HEIGHT, tables)


# --- CONTENT PADDING & INSETS ---

def padding(metrics: ViewportMetrics, tables: Optional[ResponsiveTables] = None) -> EdgeInsets:
    """Per-category page padding; unscaled, the tables already grow with the category."""
    tables = tables or DEFAULT_TABLES
    category = classify(metrics, tables)
    return EdgeInsets.symmetric(
        horizontal=tables.content_padding_horizontal.resolve(category),
        vertical=tables.content_padding_vertical.resolve(category),
    )


def margin(metrics: ViewportMetrics, tables: Optional[ResponsiveTables] = None) -> EdgeInsets:
    tables = tables or DEFAULT_TABLES
    return EdgeInsets.all(tables.margin.resolve(classify(metrics, tables)))


def symmetric(metrics: ViewportMetrics, horizontal: Optional[float] = None,
              vertical: Optional[float] = None,
              tables: Optional[ResponsiveTables] = None) -> EdgeInsets:
    """Scaled symmetric insets; an unset axis is zero."""
    return EdgeInsets.symmetric(
        horizontal=spacing(metrics, horizontal, tables) if horizontal is not None else 0.0,
        vertical=spacing(metrics, vertical, tables) if vertical is not None else 0.0,
    )


def all_insets(metrics: ViewportMetrics, base_spacing: float,
               tables: Optional[ResponsiveTables] = None) -> EdgeInsets:
    return EdgeInsets.all(spacing(metrics, base_spacing, tables))


def only(metrics: ViewportMetrics, left: Optional[float] = None, top: Optional[float] = None,
         right: Optional[float] = None, bottom: Optional[float] = None,
         tables: Optional[ResponsiveTables] = None) -> EdgeInsets:
    def _side(value):
        return spacing(metrics, value, tables) if value is not None else 0.0

    return EdgeInsets(left=_side(left), top=_side(top), right=_side(right), bottom=_side(bottom))


# --- GRID & CARDS ---

def grid_columns(metrics: ViewportMetrics, tables: Optional[ResponsiveTables] = None) -> int:
    tables = tables or DEFAULT_TABLES
    return tables.grid_columns.resolve(classify(metrics, tables))


def card_aspect_ratio(metrics: ViewportMetrics, tables: Optional[ResponsiveTables] = None) -> float:
    tables = tables or DEFAULT_TABLES
    return tables.card_aspect_ratio.resolve(classify(metrics, tables))


# --- APP BAR ---

def toolbar_height(metrics: ViewportMetrics, base_height: float = TOOLBAR_HEIGHT,
                   tables: Optional[ResponsiveTables] = None) -> float:
    return spacing(metrics, base_height, tables)


def expanded_height(metrics: ViewportMetrics, base_height: float = EXPANDED_HEIGHT,
                    tables: Optional[ResponsiveTables] = None) -> float:
    return spacing(metrics, base_height, tables)


def content_top_padding(metrics: ViewportMetrics, base_padding: float = CONTENT_TOP_PADDING,
                        tables: Optional[ResponsiveTables] = None) -> float:
    """Top padding that keeps content clear of a collapsing app bar."""
    return spacing(metrics, base_padding, tables)


def section_spacing(metrics: ViewportMetrics, base_spacing: float = SECTION_SPACING,
                    tables: Optional[ResponsiveTables] = None) -> float:
    return spacing(metrics, base_spacing, tables)


# --- VIEWPORT HELPERS ---

def width_percentage(metrics: ViewportMetrics, percentage: float) -> float:
    return metrics.width * (percentage / 100)


def height_percentage(metrics: ViewportMetrics, percentage: float) -> float:
    return metrics.height * (percentage / 100)


def orientation(metrics: ViewportMetrics) -> str:
    return "landscape" if metrics.is_landscape else "portrait"
