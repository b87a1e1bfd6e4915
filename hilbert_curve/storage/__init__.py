"""
Storage module for Hilbert curve lookup tables.
"""

from .json_storage import (
    JSONStorage,
    NumpyEncoder,
    numpy_decoder,
    build_table,
    save_table,
    load_table,
)

__all__ = [
    "JSONStorage",
    "NumpyEncoder",
    "numpy_decoder",
    "build_table",
    "save_table",
    "load_table",
]
