import os
import sys
import pytest

# Add the project root to the import path so the launcher and package resolve
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from responsive_metrics import ViewportMetrics


@pytest.fixture
def tall_phone():
    """400x800 portrait phone, aspect 0.5, scale factor 0.92."""
    return ViewportMetrics(width=400, height=800, pixel_density=2.0)


@pytest.fixture
def iphone_se():
    """375x667 portrait phone used by the dialog scenarios."""
    return ViewportMetrics(width=375, height=667, pixel_density=2.0)


@pytest.fixture
def full_hd():
    """1920x1080 desktop monitor, scale factor 1.3 * 1.08 = 1.404."""
    return ViewportMetrics(width=1920, height=1080, pixel_density=1.0)


# A spread of viewports covering every category, orientation and density band
VIEWPORT_GRID = [
    ViewportMetrics(width=w, height=h, pixel_density=d)
    for w in (240, 320, 375, 414, 479, 480, 600, 767, 768, 900, 1023, 1024, 1280, 1440, 1920, 2560, 3840)
    for h in (180, 360, 667, 800, 1080, 1366, 2160)
    for d in (0.75, 1.0, 2.0, 2.5, 3.0, 3.5)
]


@pytest.fixture
def viewport_grid():
    return VIEWPORT_GRID
