"""
MatrixStore: пара матриц A, B общей размерности N

Плоский агрегат без собственной логики: хранит A, B и N как единое
согласованное состояние. Ссылки на матрицы неизменны (frozen), содержимое
матриц изменяется на месте операциями swap/update. Reload заменяет весь
MatrixStore целиком.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from .matrix import Matrix, MatrixLabel


class MatrixStore(BaseModel):
    """Хранилище матриц сессии."""

    size: int = Field(..., gt=0, description="Размерность N обеих матриц")
    a: Matrix = Field(..., description="Матрица A")
    b: Matrix = Field(..., description="Матрица B")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_dimensions(self) -> "MatrixStore":
        """A и B обязаны быть N×N."""
        for label, matrix in ((MatrixLabel.A, self.a), (MatrixLabel.B, self.b)):
            if matrix.size != self.size:
                raise ValueError(
                    f"Matrix {label.value} is {matrix.size}x{matrix.size}, "
                    f"expected {self.size}x{self.size}"
                )
        return self

    @classmethod
    def from_rows(cls, a_rows: list[list[int]], b_rows: list[list[int]]) -> "MatrixStore":
        """Сборка хранилища из строк; N берётся из A."""
        return cls(size=len(a_rows), a=Matrix(rows=a_rows), b=Matrix(rows=b_rows))

    def get(self, label: MatrixLabel) -> Matrix:
        if label == MatrixLabel.A:
            return self.a
        return self.b

    def to_contract(self) -> dict[str, Any]:
        """
        JSON-снапшот для контракта matrix_store.

        Returns:
            {"N": int, "A": [[int]], "B": [[int]]}
        """
        return {
            "N": self.size,
            "A": self.a.to_lists(),
            "B": self.b.to_lists(),
        }
