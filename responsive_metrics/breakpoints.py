# responsive_metrics/breakpoints.py
"""
Viewport classification.

Raw width alone misclassifies foldables and ultra-wide phones held in
landscape, so a viewport more than twice as wide as it is tall is bumped one
category up.
"""
import logging
from typing import Optional

from .constants import DEFAULT_TABLES, LANDSCAPE_ASPECT, VERY_WIDE_ASPECT
from .schemas import ResponsiveTables, SizeCategory, ViewportMetrics

logger = logging.getLogger(__name__)


def classify(metrics: ViewportMetrics, tables: Optional[ResponsiveTables] = None) -> SizeCategory:
    """Map a viewport to its SizeCategory. Thresholds use strict `<`."""
    breakpoints = (tables or DEFAULT_TABLES).breakpoints
    width = metrics.width
    aspect_ratio = metrics.aspect_ratio
    is_landscape = aspect_ratio > LANDSCAPE_ASPECT
    is_very_wide = aspect_ratio > VERY_WIDE_ASPECT

    if width < breakpoints.mobile:
        category = SizeCategory.MOBILE
    elif width < breakpoints.tablet:
        category = SizeCategory.TABLET
    elif width < breakpoints.desktop:
        category = SizeCategory.DESKTOP
    else:
        return SizeCategory.LARGE_DESKTOP

    if is_very_wide and is_landscape:
        logger.debug(f"Very wide viewport ({aspect_ratio:.2f}); bumping {category.value} up one tier.")
        return category.bumped()
    return category


def is_mobile(metrics: ViewportMetrics, tables: Optional[ResponsiveTables] = None) -> bool:
    return classify(metrics, tables) is SizeCategory.MOBILE


def is_tablet(metrics: ViewportMetrics, tables: Optional[ResponsiveTables] = None) -> bool:
    return classify(metrics, tables) is SizeCategory.TABLET


def is_desktop(metrics: ViewportMetrics, tables: Optional[ResponsiveTables] = None) -> bool:
    return classify(metrics, tables) is SizeCategory.DESKTOP


def is_large_desktop(metrics: ViewportMetrics, tables: Optional[ResponsiveTables] = None) -> bool:
    return classify(metrics, tables) is SizeCategory.LARGE_DESKTOP
