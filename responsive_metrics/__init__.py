# responsive_metrics/__init__.py
"""Viewport-driven scale factors, derived metrics and dialog geometry."""
from .breakpoints import classify
from .constants import DEFAULT_TABLES
from .engine import ResponsiveSystem
from .errors import (
    ConfigValidationError,
    DialogOverflowError,
    InvalidButtonCountError,
    InvalidViewportError,
    ResponsiveError,
)
from .scaling import scale_factor
from .schemas import (
    ButtonConstraints,
    CategoryTable,
    DialogGeometry,
    DialogPadding,
    EdgeInsets,
    MetricKind,
    ResponsiveTables,
    SizeCategory,
    ViewportMetrics,
)
from .selector import select

__version__ = "1.0.0"
