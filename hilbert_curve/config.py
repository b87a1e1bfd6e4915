"""
Configuration module for the Hilbert curve package.

Contains the configurable parameters for mappers, plots and table storage.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List
import json
from pathlib import Path

from .exceptions import ConfigError


MAX_ORDER = 31


@dataclass
class PlotParams:
    """Curve plot parameters."""
    color: str = "tab:blue"
    linewidth: float = 1.0
    show_points: bool = False   # Mark cell centres
    annotate: bool = False      # Write d next to each cell (small grids only)
    dpi: int = 150


@dataclass
class StorageParams:
    """Lookup table storage parameters."""
    base_path: Path = field(default_factory=lambda: Path("./tables"))
    compress: bool = False


@dataclass
class CurveConfig:
    """
    Main configuration container.

    Example:
        config = CurveConfig(order=6, check_bounds=True)
        config.save("curve.json")
    """
    order: int = 4                  # Grid side = 2^order
    cache: bool = True              # Cache lookups in HilbertMapper
    check_bounds: bool = False      # Range-check inputs
    use_compiled: bool = True       # numba kernels for array conversions

    plot: PlotParams = field(default_factory=PlotParams)
    storage: StorageParams = field(default_factory=StorageParams)

    @property
    def grid_size(self) -> int:
        """Side length of the grid."""
        return 1 << self.order

    def save(self, path: str | Path) -> None:
        """Save configuration to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self._to_dict()
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

    @classmethod
    def load(cls, path: str | Path) -> "CurveConfig":
        """Load configuration from JSON file."""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        return cls._from_dict(data)

    def _to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        def convert(obj):
            if isinstance(obj, Path):
                return str(obj)
            elif hasattr(obj, '__dataclass_fields__'):
                return {k: convert(v) for k, v in obj.__dict__.items()}
            return obj

        return convert(self)

    @classmethod
    def _from_dict(cls, data: dict) -> "CurveConfig":
        """Reconstruct from dictionary."""
        data = dict(data)
        if 'plot' in data:
            data['plot'] = PlotParams(**data['plot'])
        if 'storage' in data:
            storage = dict(data['storage'])
            if 'base_path' in storage:
                storage['base_path'] = Path(storage['base_path'])
            data['storage'] = StorageParams(**storage)
        return cls(**data)

    def errors(self) -> List[str]:
        """Hard configuration errors."""
        issues = []

        if not isinstance(self.order, int) or isinstance(self.order, bool):
            issues.append("order must be an integer")
        elif not 0 <= self.order <= MAX_ORDER:
            issues.append(f"order must be in [0, {MAX_ORDER}]")

        if self.plot.linewidth <= 0:
            issues.append("plot.linewidth must be positive")
        if self.plot.dpi <= 0:
            issues.append("plot.dpi must be positive")

        return issues

    def validate(self) -> List[str]:
        """Validate configuration, return list of warnings/errors."""
        issues = self.errors()

        if not issues and self.order > 12:
            issues.append("order > 12 makes full lookup tables very large")

        return issues

    def validate_or_raise(self) -> None:
        """Raise ConfigError if the configuration has hard errors."""
        errors = self.errors()
        if errors:
            raise ConfigError(errors)


# Preset configurations
def minimal_config() -> CurveConfig:
    """Small grid for quick checks."""
    return CurveConfig(order=2, plot=PlotParams(show_points=True, annotate=True))


def standard_config() -> CurveConfig:
    """Typical 64 × 64 grid."""
    return CurveConfig(order=6)
