# responsive_metrics/selector.py
"""Fallback-chain selection of per-category values."""
from typing import Optional, TypeVar

from .breakpoints import classify
from .errors import ResponsiveError
from .schemas import SizeCategory

T = TypeVar("T")


def select(category: SizeCategory, mobile: T, tablet: Optional[T] = None,
           desktop: Optional[T] = None, large_desktop: Optional[T] = None) -> T:
    """
    Pick the value for `category`, falling back toward MOBILE through
    large_desktop -> desktop -> tablet -> mobile when a tier is unset.
    """
    if mobile is None:
        raise ResponsiveError("A mobile value is required as the final fallback.")

    tiers = (mobile, tablet, desktop, large_desktop)
    for value in reversed(tiers[:category.rank + 1]):
        if value is not None:
            return value
    return mobile


def responsive(metrics, mobile: T, tablet: Optional[T] = None,
               desktop: Optional[T] = None, large_desktop: Optional[T] = None,
               tables=None) -> T:
    """Classify `metrics` and select the matching tier."""
    return select(classify(metrics, tables=tables), mobile, tablet, desktop, large_desktop)
