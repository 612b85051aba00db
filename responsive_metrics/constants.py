# responsive_metrics/constants.py
"""
Process-wide constant tables.

Step tables are (threshold, value) pairs evaluated in order; the first
matching row wins. Everything here is read-only: overrides produce a new
ResponsiveTables through the ResourceManager, never an in-place edit.
"""
from typing import Tuple

from .schemas import BreakpointTable, CategoryTable, ResponsiveTables

# --- SCALE FACTOR STEPS ---

# Portrait bands use "<", landscape bands use ">"; 1.0..1.3 inclusive is neutral.
ASPECT_BELOW_STEPS: Tuple[Tuple[float, float], ...] = (
    (0.6, 0.92),
    (0.8, 0.96),
    (1.0, 0.98),
)
ASPECT_ABOVE_STEPS: Tuple[Tuple[float, float], ...] = (
    (2.5, 1.15),
    (2.0, 1.12),
    (1.6, 1.08),
    (1.3, 1.04),
)
NEUTRAL_ASPECT_ADJUSTMENT = 1.0

DENSITY_STEPS: Tuple[Tuple[float, float], ...] = (
    (3.0, 1.05),
    (2.0, 1.02),
)
NEUTRAL_DENSITY_ADJUSTMENT = 1.0

LANDSCAPE_ASPECT = 1.0
VERY_WIDE_ASPECT = 2.0

# --- METRIC KINDS ---

ELEVATION_MULTIPLIER = 1.2
LINE_HEIGHT_MULTIPLIER = 0.9

# --- DIALOG GEOMETRY ---

DIALOG_OUTER_PADDING_STEPS: Tuple[Tuple[float, float], ...] = (
    (2.0, 0.15),
    (1.5, 0.12),
    (1.0, 0.10),
)
DIALOG_OUTER_PADDING_DEFAULT = 0.08

DIALOG_INNER_PADDING_STEPS: Tuple[Tuple[float, float], ...] = (
    (2.0, 0.08),
    (1.5, 0.06),
)
DIALOG_INNER_PADDING_DEFAULT = 0.05

DIALOG_VERTICAL_PADDING_RATIO = 0.8
DIALOG_BUTTON_BUFFER = 4.0
DIALOG_BUTTON_SPACING = 12.0

# --- APP BAR DEFAULTS ---

TOOLBAR_HEIGHT = 60.0
EXPANDED_HEIGHT = 120.0
CONTENT_TOP_PADDING = 20.0
SECTION_SPACING = 40.0

# --- THE DEFAULT TABLES ---

DEFAULT_TABLES = ResponsiveTables(
    breakpoints=BreakpointTable(mobile=480.0, tablet=768.0, desktop=1024.0, large_desktop=1440.0),
    base_scale=CategoryTable(1.0, 1.1, 1.2, 1.3),
    content_padding_horizontal=CategoryTable(16.0, 24.0, 32.0, 48.0),
    content_padding_vertical=CategoryTable(8.0, 12.0, 16.0, 20.0),
    margin=CategoryTable(8.0, 12.0, 16.0, 20.0),
    grid_columns=CategoryTable(1, 2, 3, 4),
    card_aspect_ratio=CategoryTable(1.0, 1.2, 1.4, 1.6),
    dialog_min_padding=CategoryTable(16.0, 24.0, 32.0, 48.0),
    dialog_min_width=CategoryTable(280.0, 320.0, 400.0, 480.0),
    dialog_max_width_fraction=CategoryTable(0.9, 0.85, 0.75, 0.65),
    min_button_width=CategoryTable(100.0, 120.0, 140.0, 160.0),
)
