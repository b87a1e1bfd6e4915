"""
JSON storage for Hilbert curve lookup tables.
"""

from __future__ import annotations
import json
import gzip
import logging
import numbers
from pathlib import Path
from typing import Dict, List, Any, Union
from dataclasses import asdict, is_dataclass
import numpy as np

from ..core import check_grid_size, distances_to_points
from ..exceptions import GridSizeError


logger = logging.getLogger(__name__)


class NumpyEncoder(json.JSONEncoder):
    """JSON encoder that handles numpy arrays."""

    def default(self, obj):
        if isinstance(obj, np.ndarray):
            return {
                '__numpy__': True,
                'dtype': str(obj.dtype),
                'shape': obj.shape,
                'data': obj.tolist(),
            }
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.bool_):
            return bool(obj)
        if isinstance(obj, Path):
            return str(obj)
        if is_dataclass(obj) and not isinstance(obj, type):
            return asdict(obj)
        return super().default(obj)


def numpy_decoder(dct):
    """JSON decoder hook for numpy arrays."""
    if '__numpy__' in dct:
        return np.array(dct['data'], dtype=dct['dtype']).reshape(dct['shape'])
    return dct


def _dump(data: Any, filepath: Path, compress: bool) -> None:
    if compress:
        with gzip.open(filepath, 'wt', encoding='utf-8') as f:
            json.dump(data, f, cls=NumpyEncoder)
    else:
        with open(filepath, 'w', encoding='utf-8') as f:
            json.dump(data, f, cls=NumpyEncoder, indent=2)


GZIP_MAGIC = b'\x1f\x8b'


def _read(filepath: Path) -> Any:
    with open(filepath, 'rb') as f:
        compressed = f.read(2) == GZIP_MAGIC

    if compressed:
        with gzip.open(filepath, 'rt', encoding='utf-8') as f:
            return json.load(f, object_hook=numpy_decoder)
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f, object_hook=numpy_decoder)


class JSONStorage:
    """
    JSON-based storage backend.

    Supports:
    - Plain JSON files
    - Gzipped JSON files
    - Automatic numpy array handling
    """

    EXTENSIONS = ('', '.json', '.json.gz')

    def __init__(self, base_path: Union[str, Path]):
        """
        Initialize JSON storage.

        Args:
            base_path: Base directory for storage
        """
        self.base_path = Path(base_path)
        self.base_path.mkdir(parents=True, exist_ok=True)

    def _find(self, filename: str) -> Path:
        for ext in self.EXTENSIONS:
            filepath = self.base_path / f"{filename}{ext}"
            if filepath.is_file():
                return filepath
        raise FileNotFoundError(f"No JSON file found for {filename}")

    def save(
        self,
        data: Any,
        filename: str,
        compress: bool = False,
    ) -> Path:
        """
        Save data to JSON file.

        Args:
            data: Data to save
            filename: Filename (without extension)
            compress: Use gzip compression

        Returns:
            Path to saved file
        """
        ext = '.json.gz' if compress else '.json'
        filepath = self.base_path / f"{filename}{ext}"
        _dump(data, filepath, compress)
        logger.debug(f"Saved {filepath}")
        return filepath

    def load(self, filename: str) -> Any:
        """
        Load data from JSON file.

        Args:
            filename: Filename (with or without extension)

        Returns:
            Loaded data
        """
        return _read(self._find(filename))

    def list_files(self, pattern: str = "*.json*") -> List[Path]:
        """List all JSON files in storage."""
        return sorted(self.base_path.glob(pattern))

    def exists(self, filename: str) -> bool:
        """Check if file exists."""
        try:
            self._find(filename)
        except FileNotFoundError:
            return False
        return True

    def delete(self, filename: str) -> bool:
        """Delete file if exists."""
        try:
            filepath = self._find(filename)
        except FileNotFoundError:
            return False
        filepath.unlink()
        return True


def build_table(order: int) -> Dict[str, Any]:
    """
    Build the lookup table for a grid order.

    Returns:
        {"order", "size", "points"} with points of shape (size², 2)
    """
    if order < 0:
        raise GridSizeError(f"Order must be non-negative, got {order}")
    n = 1 << order
    points = distances_to_points(np.arange(n * n, dtype=np.int64), n)
    return {'order': order, 'size': n, 'points': points}


def save_table(
    source: Any,
    filepath: Union[str, Path],
    compress: bool = True,
) -> Path:
    """
    Save a curve lookup table.

    Args:
        source: HilbertMapper (anything with .order) or an integer order
        filepath: Full path to save file
        compress: Use gzip compression

    Returns:
        Path to saved file
    """
    order = int(source) if isinstance(source, numbers.Integral) else source.order
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    table = build_table(order)
    _dump(table, filepath, compress or str(filepath).endswith('.gz'))

    logger.info(f"Wrote {table['size']}x{table['size']} table to {filepath}")
    return filepath


def load_table(filepath: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a curve lookup table.

    Args:
        filepath: Path to table file

    Returns:
        Table dict with points as a numpy array

    Raises:
        GridSizeError: if the stored size is not a power of 2 or does
            not match the stored order and point count
    """
    table = _read(Path(filepath))

    n = int(table['size'])
    check_grid_size(n)
    points = np.asarray(table['points'], dtype=np.int64)
    if n != 1 << int(table['order']) or points.shape != (n * n, 2):
        raise GridSizeError(
            f"Table for n={n} has order {table['order']} and {len(points)} points"
        )
    table['points'] = points

    return table
