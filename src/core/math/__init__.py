"""
Core math modules

Целочисленная арифметика фиксированной ширины
и разбор целых из пользовательского ввода.
"""

# Fixed-width arithmetic
from src.core.math.int64 import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    add_int64,
    is_int64,
    mul_int64,
    sum_int64,
    wrap_int64,
)

# Integer parsing
from src.core.math.parsing import (
    INT32_BOUNDS,
    INT64_BOUNDS,
    NotANumber,
    OutOfRange,
    parse_int,
    parse_int_fields,
    scan_int,
)

__all__ = [
    # Fixed-width arithmetic: Constants
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    # Fixed-width arithmetic: Functions
    "add_int64",
    "is_int64",
    "mul_int64",
    "sum_int64",
    "wrap_int64",
    # Integer parsing: Constants
    "INT32_BOUNDS",
    "INT64_BOUNDS",
    # Integer parsing: Exceptions
    "NotANumber",
    "OutOfRange",
    # Integer parsing: Functions
    "parse_int",
    "parse_int_fields",
    "scan_int",
]
