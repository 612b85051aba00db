# responsive_metrics/schemas.py
"""
The Measuring Rods.

Defines the value types passed between the engine and the layout layer, and
the TypedDict schemas a tables override file must follow. Value types are
frozen dataclasses: they are built fresh for every query and never mutated.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar, TypedDict

from .errors import InvalidViewportError

T = TypeVar("T")


# --- SIZE CATEGORIES ---

class SizeCategory(Enum):
    """Coarse viewport classes, ordered from smallest to largest."""
    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"
    LARGE_DESKTOP = "large_desktop"

    @property
    def rank(self) -> int:
        return _CATEGORY_ORDER.index(self)

    def __lt__(self, other):
        if not isinstance(other, SizeCategory):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, SizeCategory):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, SizeCategory):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, SizeCategory):
            return NotImplemented
        return self.rank >= other.rank

    def bumped(self) -> "SizeCategory":
        """The next larger category, saturating at LARGE_DESKTOP."""
        return _CATEGORY_ORDER[min(self.rank + 1, len(_CATEGORY_ORDER) - 1)]


_CATEGORY_ORDER = (
    SizeCategory.MOBILE,
    SizeCategory.TABLET,
    SizeCategory.DESKTOP,
    SizeCategory.LARGE_DESKTOP,
)


class MetricKind(Enum):
    FONT = "font"
    SPACING = "spacing"
    ICON = "icon"
    RADIUS = "radius"
    BORDER_WIDTH = "border_width"
    ELEVATION = "elevation"
    LINE_HEIGHT = "line_height"
    BUTTON_HEIGHT = "button_height"
    CARD_HEIGHT = "card_height"


# --- VIEWPORT ---

@dataclass(frozen=True)
class ViewportMetrics:
    """
    The width/height/pixel-density triple the host supplies on every query.

    Width and height are in density-independent units. Construction rejects
    non-positive and non-finite values, so `aspect_ratio` is always defined.
    """
    width: float
    height: float
    pixel_density: float = 1.0

    def __post_init__(self):
        for name in ("width", "height", "pixel_density"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidViewportError(f"{name} must be a number, got {type(value).__name__}")
            if not math.isfinite(value) or value <= 0:
                raise InvalidViewportError(f"{name} must be a positive finite number, got {value}")

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def is_landscape(self) -> bool:
        return self.aspect_ratio > 1.0

    @property
    def min_dimension(self) -> float:
        return min(self.width, self.height)

    @property
    def max_dimension(self) -> float:
        return max(self.width, self.height)


# --- DERIVED GEOMETRY ---

@dataclass(frozen=True)
class EdgeInsets:
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    @classmethod
    def symmetric(cls, horizontal: float = 0.0, vertical: float = 0.0) -> "EdgeInsets":
        return cls(left=horizontal, top=vertical, right=horizontal, bottom=vertical)

    @classmethod
    def all(cls, value: float) -> "EdgeInsets":
        return cls(left=value, top=value, right=value, bottom=value)


@dataclass(frozen=True)
class DialogPadding:
    horizontal: float
    vertical: float


@dataclass(frozen=True)
class ButtonConstraints:
    min_width: float
    max_width: float


@dataclass(frozen=True)
class DialogGeometry:
    """Everything a dialog needs to lay out its body and action row."""
    width: float
    horizontal_padding: float
    vertical_padding: float
    button_width: float
    button_count: int
    spacing: float

    @property
    def row_width(self) -> float:
        """Width taken by the button row plus the padding on both sides."""
        return (
            self.button_width * self.button_count
            + self.spacing * (self.button_count - 1)
            + self.horizontal_padding * 2
        )

    @property
    def fits(self) -> bool:
        return self.row_width <= self.width


# --- CONFIGURATION TABLES ---

@dataclass(frozen=True)
class CategoryTable(Generic[T]):
    """
    One value per size category. Only `mobile` is mandatory; missing tiers
    resolve through the selector's fallback chain.
    """
    mobile: T
    tablet: Optional[T] = None
    desktop: Optional[T] = None
    large_desktop: Optional[T] = None

    def resolve(self, category: SizeCategory) -> T:
        from .selector import select
        return select(category, self.mobile, self.tablet, self.desktop, self.large_desktop)


@dataclass(frozen=True)
class BreakpointTable:
    mobile: float = 480.0
    tablet: float = 768.0
    desktop: float = 1024.0
    large_desktop: float = 1440.0


@dataclass(frozen=True)
class ResponsiveTables:
    """Immutable bundle of every constant table the calculators consult."""
    breakpoints: BreakpointTable
    base_scale: CategoryTable[float]
    content_padding_horizontal: CategoryTable[float]
    content_padding_vertical: CategoryTable[float]
    margin: CategoryTable[float]
    grid_columns: CategoryTable[int]
    card_aspect_ratio: CategoryTable[float]
    dialog_min_padding: CategoryTable[float]
    dialog_min_width: CategoryTable[float]
    dialog_max_width_fraction: CategoryTable[float]
    min_button_width: CategoryTable[float]


# --- OVERRIDE FILE SCHEMAS ---

class BreakpointsTypedDict(TypedDict, total=False):
    mobile: float
    tablet: float
    desktop: float
    large_desktop: float


class CategoryValuesTypedDict(TypedDict, total=False):
    mobile: float
    tablet: float
    desktop: float
    large_desktop: float


class CategoryCountsTypedDict(TypedDict, total=False):
    mobile: int
    tablet: int
    desktop: int
    large_desktop: int


class ResponsiveTablesFileTypedDict(TypedDict, total=False):
    breakpoints: BreakpointsTypedDict
    base_scale: CategoryValuesTypedDict
    content_padding_horizontal: CategoryValuesTypedDict
    content_padding_vertical: CategoryValuesTypedDict
    margin: CategoryValuesTypedDict
    grid_columns: CategoryCountsTypedDict
    card_aspect_ratio: CategoryValuesTypedDict
    dialog_min_padding: CategoryValuesTypedDict
    dialog_min_width: CategoryValuesTypedDict
    dialog_max_width_fraction: CategoryValuesTypedDict
    min_button_width: CategoryValuesTypedDict

