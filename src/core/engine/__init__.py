"""Operation Engine: арифметика и структурные операции над матрицами."""

from .operations import (
    add,
    main_diagonal_sum,
    multiply,
    secondary_diagonal_sum,
    swap_cols,
    swap_rows,
    update_cell,
)

__all__ = [
    "add",
    "main_diagonal_sum",
    "multiply",
    "secondary_diagonal_sum",
    "swap_cols",
    "swap_rows",
    "update_cell",
]
