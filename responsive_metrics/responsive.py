# responsive_metrics/responsive.py
"""
Kivy display context.

Reads the live window into ViewportMetrics and re-exposes the engine's font
scaling as sp values for the widgets. Callers pass the ResponsiveSystem that
holds their tables; without one the built-in tables are used. Kivy is
imported lazily so the engine can be imported, and tested, without opening a
window.
"""
import logging
from typing import Callable, Optional

from .engine import ResponsiveSystem
from .schemas import ViewportMetrics

logger = logging.getLogger(__name__)

_DEFAULT_SYSTEM = ResponsiveSystem()


def _window(window=None):
    if window is None:
        from kivy.core.window import Window
        window = Window
    return window


def _density(density: Optional[float] = None) -> float:
    if density is None:
        from kivy.metrics import Metrics
        density = Metrics.density
    return float(density)


def current_viewport(window=None, density: Optional[float] = None) -> ViewportMetrics:
    """Logical size in dp so decisions are density-independent."""
    window = _window(window)
    density = _density(density)
    width, height = window.size
    return ViewportMetrics(width=width / density, height=height / density, pixel_density=density)


def bind_viewport(callback: Callable[[ViewportMetrics], None], window=None,
                  density: Optional[float] = None) -> Callable[[], None]:
    """
    Call `callback` with fresh metrics whenever the window is resized or
    rotated. Returns a function that removes the binding.
    """
    window = _window(window)

    def _on_size(*_):
        try:
            metrics = current_viewport(window, density)
        except ValueError as e:
            # Minimised windows report a zero size; skip until they come back.
            logger.debug(f"Ignoring window resize: {e}")
            return
        callback(metrics)

    window.bind(size=_on_size)
    return lambda: window.unbind(size=_on_size)


def scaled_font_size(base_size: float, min_size: Optional[float] = None, max_size: Optional[float] = None,
                     metrics: Optional[ViewportMetrics] = None,
                     system: Optional[ResponsiveSystem] = None) -> float:
    """Scale a base font size for the viewport, then clamp."""
    if metrics is None:
        metrics = current_viewport()
    val = (system or _DEFAULT_SYSTEM).font_size(metrics, base_size)
    if min_size is not None:
        val = max(val, min_size)
    if max_size is not None:
        val = min(val, max_size)
    return val


def scale_sp(base_sp: float, min_sp: Optional[float] = None, max_sp: Optional[float] = None,
             metrics: Optional[ViewportMetrics] = None, system: Optional[ResponsiveSystem] = None) -> float:
    from kivy.metrics import sp
    return sp(scaled_font_size(base_sp, min_sp, max_sp, metrics, system))


def body_sp(metrics: Optional[ViewportMetrics] = None, system: Optional[ResponsiveSystem] = None) -> float:
    """Body text: 15sp scaled, kept readable between 12 and 18."""
    return scale_sp(15, min_sp=12, max_sp=18, metrics=metrics, system=system)
