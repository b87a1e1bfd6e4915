"""
Exceptions raised by the Hilbert curve package.
"""


class HilbertError(Exception):
    """Base class for all package errors."""


class GridSizeError(HilbertError, ValueError):
    """Grid side is not a power of two, or the order is out of range."""


class CoordinateError(HilbertError, ValueError):
    """A distance or coordinate lies outside the grid (opt-in checks only)."""


class ConfigError(HilbertError, ValueError):
    """Invalid curve configuration."""

    def __init__(self, issues):
        self.issues = list(issues)
        super().__init__("; ".join(self.issues))
