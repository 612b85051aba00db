# responsive_metrics/errors.py
"""
Failure types raised by the responsive metrics engine.

Every error is a ValueError so callers that only care about "bad input" can
catch the builtin, while the layout layer can tell the cases apart.
"""
from typing import List, Optional


class ResponsiveError(ValueError):
    """Base class for every precondition failure in the engine."""


class InvalidViewportError(ResponsiveError):
    """Raised when width, height or pixel density is non-positive or non-finite."""


class InvalidButtonCountError(ResponsiveError):
    """Raised when a dialog button row is requested with fewer than one button."""


class DialogOverflowError(ResponsiveError):
    """Raised when a button row cannot fit inside the dialog even at zero width."""


class ConfigValidationError(ResponsiveError):
    """Raised when a tables override file breaks its schema."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = list(errors or [])
