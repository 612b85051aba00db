# responsive_metrics/engine.py
"""
The Oracle of Proportions.

ResponsiveSystem binds one immutable ResponsiveTables to every calculator so
the layout layer can pass viewport metrics alone. It has no lifecycle and no
per-call state: share one instance across screens, frames and threads.
"""
from typing import Any, Dict, Optional, TypeVar

from . import dialog, metrics as _metrics
from .breakpoints import classify
from .constants import DEFAULT_TABLES
from .scaling import scale_factor
from .schemas import (
    ButtonConstraints,
    DialogGeometry,
    DialogPadding,
    EdgeInsets,
    MetricKind,
    ResponsiveTables,
    SizeCategory,
    ViewportMetrics,
)
from .selector import select

T = TypeVar("T")


class ResponsiveSystem:
    def __init__(self, tables: Optional[ResponsiveTables] = None):
        self.tables = tables or DEFAULT_TABLES

    # --- CLASSIFICATION & SCALE ---

    def screen_size(self, metrics: ViewportMetrics) -> SizeCategory:
        return classify(metrics, self.tables)

    def scale_factor(self, metrics: ViewportMetrics) -> float:
        return scale_factor(metrics, tables=self.tables)

    def responsive(self, metrics: ViewportMetrics, mobile: T, tablet: Optional[T] = None,
                   desktop: Optional[T] = None, large_desktop: Optional[T] = None) -> T:
        return select(self.screen_size(metrics), mobile, tablet, desktop, large_desktop)

    # --- METRICS ---

    def transform(self, metrics: ViewportMetrics, base_value: float, kind: MetricKind) -> float:
        return _metrics.transform(metrics, base_value, kind, self.tables)

    def font_size(self, metrics: ViewportMetrics, base_size: float, scale_factor: Optional[float] = None) -> float:
        return _metrics.font_size(metrics, base_size, scale_factor, self.tables)

    def spacing(self, metrics: ViewportMetrics, base_spacing: float) -> float:
        return _metrics.spacing(metrics, base_spacing, self.tables)

    def icon_size(self, metrics: ViewportMetrics, base_size: float) -> float:
        return _metrics.icon_size(metrics, base_size, self.tables)

    def border_radius(self, metrics: ViewportMetrics, base_radius: float) -> float:
        return _metrics.border_radius(metrics, base_radius, self.tables)

    def border_width(self, metrics: ViewportMetrics, base_width: float) -> float:
        return _metrics.border_width(metrics, base_width, self.tables)

    def elevation(self, metrics: ViewportMetrics, base_elevation: float) -> float:
        return _metrics.elevation(metrics, base_elevation, self.tables)

    def line_height(self, metrics: ViewportMetrics, base_height: float) -> float:
        return _metrics.line_height(metrics, base_height, self.tables)

    def button_height(self, metrics: ViewportMetrics, base_height: float) -> float:
        return _metrics.button_height(metrics, base_height, self.tables)

    def card_height(self, metrics: ViewportMetrics, base_height: float) -> float:
        return _metrics.card_height(metrics, base_height, self.tables)

    def padding(self, metrics: ViewportMetrics) -> EdgeInsets:
        return _metrics.padding(metrics, self.tables)

    def margin(self, metrics: ViewportMetrics) -> EdgeInsets:
        return _metrics.margin(metrics, self.tables)

    def grid_columns(self, metrics: ViewportMetrics) -> int:
        return _metrics.grid_columns(metrics, self.tables)

    def card_aspect_ratio(self, metrics: ViewportMetrics) -> float:
        return _metrics.card_aspect_ratio(metrics, self.tables)

    # --- DIALOGS ---

    def dialog_width(self, metrics: ViewportMetrics) -> float:
        return dialog.dialog_width(metrics, self.tables)

    def dialog_padding(self, metrics: ViewportMetrics) -> DialogPadding:
        return dialog.dialog_padding(metrics, self.tables)

    def dialog_button_width(self, metrics: ViewportMetrics, button_count: int,
                            spacing: Optional[float] = None) -> float:
        return dialog.dialog_button_width(metrics, button_count, spacing, self.tables)

    def dialog_action_constraints(self, metrics: ViewportMetrics, button_count: int,
                                  spacing: Optional[float] = None) -> ButtonConstraints:
        return dialog.dialog_action_constraints(metrics, button_count, spacing, self.tables)

    def dialog_geometry(self, metrics: ViewportMetrics, button_count: int = 1,
                        spacing: Optional[float] = None) -> DialogGeometry:
        return dialog.dialog_geometry(metrics, button_count, spacing, self.tables)

    # --- REPORTING ---

    def describe(self, metrics: ViewportMetrics, button_count: int = 2) -> Dict[str, Any]:
        """Flat summary of the category, scale factor and representative metrics."""
        pad = self.padding(metrics)
        geometry = self.dialog_geometry(metrics, button_count)
        return {
            "width": metrics.width,
            "height": metrics.height,
            "pixel_density": metrics.pixel_density,
            "aspect_ratio": round(metrics.aspect_ratio, 3),
            "orientation": _metrics.orientation(metrics),
            "category": self.screen_size(metrics).value,
            "scale_factor": round(self.scale_factor(metrics), 4),
            "font_size_16": round(self.font_size(metrics, 16), 2),
            "spacing_16": round(self.spacing(metrics, 16), 2),
            "elevation_4": round(self.elevation(metrics, 4), 2),
            "line_height_20": round(self.line_height(metrics, 20), 2),
            "padding": (pad.left, pad.top),
            "grid_columns": self.grid_columns(metrics),
            "dialog_width": round(geometry.width, 2),
            "dialog_padding": (round(geometry.horizontal_padding, 2), round(geometry.vertical_padding, 2)),
            "dialog_button_width": round(geometry.button_width, 2),
            "dialog_buttons": geometry.button_count,
        }


def format_report(report: Dict[str, Any]) -> str:
    """Render a describe() report as aligned `key  value` lines."""
    width = max(len(key) for key in report)
    return "\n".join(f"{key.ljust(width)}  {value}" for key, value in report.items())
