"""
Domain models.

Contains the matrix model, matrix selector and the two-matrix store.
"""

from src.core.domain.matrix import Matrix, MatrixLabel, OutOfBounds
from src.core.domain.store import MatrixStore

__all__ = [
    "Matrix",
    "MatrixLabel",
    "MatrixStore",
    "OutOfBounds",
]
