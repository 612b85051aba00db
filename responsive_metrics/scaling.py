# responsive_metrics/scaling.py
"""
The single multiplier every derived metric consumes.

scale = base_scale(category) * aspect_adjustment(aspect) * density_adjustment(density)

Across all valid inputs the result stays within [0.92, 1.3 * 1.15 * 1.05].
"""
from typing import Optional

from .breakpoints import classify
from .constants import (
    ASPECT_ABOVE_STEPS,
    ASPECT_BELOW_STEPS,
    DEFAULT_TABLES,
    DENSITY_STEPS,
    NEUTRAL_ASPECT_ADJUSTMENT,
    NEUTRAL_DENSITY_ADJUSTMENT,
)
from .schemas import ResponsiveTables, SizeCategory, ViewportMetrics


def base_scale(category: SizeCategory, tables: Optional[ResponsiveTables] = None) -> float:
    return (tables or DEFAULT_TABLES).base_scale.resolve(category)


def aspect_adjustment(aspect_ratio: float) -> float:
    """Shrink tall screens to fit more content, grow wide ones to use the space."""
    # Most extreme bands first; the first match wins.
    for threshold, adjustment in ASPECT_BELOW_STEPS:
        if aspect_ratio < threshold:
            return adjustment
    for threshold, adjustment in ASPECT_ABOVE_STEPS:
        if aspect_ratio > threshold:
            return adjustment
    return NEUTRAL_ASPECT_ADJUSTMENT


def density_adjustment(pixel_density: float) -> float:
    for threshold, adjustment in DENSITY_STEPS:
        if pixel_density > threshold:
            return adjustment
    return NEUTRAL_DENSITY_ADJUSTMENT


def scale_factor(metrics: ViewportMetrics, category: Optional[SizeCategory] = None,
                 tables: Optional[ResponsiveTables] = None) -> float:
    """
    Combine the per-category base scale with the aspect-ratio and density
    adjustments. When `category` is omitted it is classified from `metrics`.
    """
    if category is None:
        category = classify(metrics, tables)
    return (
        base_scale(category, tables)
        * aspect_adjustment(metrics.aspect_ratio)
        * density_adjustment(metrics.pixel_density)
    )
