"""
I/O: загрузка матриц из текстового источника и форматирование вывода.
"""

from .formatter import DEFAULT_CELL_WIDTH, format_diagonal_sums, format_matrix
from .loader import (
    InvalidDimension,
    LoadError,
    SourceUnavailable,
    TruncatedInput,
    load_matrices,
    parse_matrices,
)

__all__ = [
    # Loader: Exceptions
    "LoadError",
    "SourceUnavailable",
    "InvalidDimension",
    "TruncatedInput",
    # Loader: Functions
    "load_matrices",
    "parse_matrices",
    # Formatter
    "DEFAULT_CELL_WIDTH",
    "format_matrix",
    "format_diagonal_sums",
]
