"""
Matrix: квадратная матрица 64-битных целых

Pydantic модель с проверкой формы при создании и bounds-checked доступом.
В отличие от frozen моделей состояния, Matrix изменяется на месте
(swap/update), поэтому все мутации идут через методы модели, которые
проверяют индексы ДО изменения данных.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Матрица всегда N×N, N > 0
2. Все значения в [INT64_MIN, INT64_MAX]
3. Неуспешная мутация не меняет ни одной ячейки
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from src.core.math.int64 import INT64_MAX, INT64_MIN, is_int64, wrap_int64


# =============================================================================
# ENUMS
# =============================================================================


class MatrixLabel(str, Enum):
    """Имя матрицы в хранилище."""

    A = "A"
    B = "B"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class OutOfBounds(IndexError):
    """Индекс строки/столбца вне [0, N)."""

    pass


# =============================================================================
# MATRIX MODEL
# =============================================================================


class Matrix(BaseModel):
    """
    Квадратная матрица N×N.

    rows хранится построчно; доступ снаружи только через методы модели.
    """

    rows: list[list[int]] = Field(
        ..., min_length=1, description="Строки матрицы (row-major, N×N)"
    )

    model_config = {"strict": True}

    @field_validator("rows")
    @classmethod
    def validate_square(cls, v: list[list[int]]) -> list[list[int]]:
        """Проверка квадратности и диапазона int64."""
        size = len(v)
        for i, row in enumerate(v):
            if len(row) != size:
                raise ValueError(
                    f"Matrix must be square: row {i} has {len(row)} cells, expected {size}"
                )
            for j, value in enumerate(row):
                if not is_int64(value):
                    raise ValueError(
                        f"Cell ({i}, {j}) = {value} outside int64 [{INT64_MIN}, {INT64_MAX}]"
                    )
        return v

    @classmethod
    def zeros(cls, size: int) -> "Matrix":
        """Нулевая матрица size×size."""
        return cls(rows=[[0] * size for _ in range(size)])

    # -------------------------------------------------------------------------
    # Чтение
    # -------------------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self.rows)

    def contains(self, index: int) -> bool:
        """True если index в [0, N)."""
        return 0 <= index < self.size

    def get(self, row: int, col: int) -> int:
        self._check_index("row", row)
        self._check_index("column", col)
        return self.rows[row][col]

    def row(self, index: int) -> list[int]:
        """Копия строки index."""
        self._check_index("row", index)
        return list(self.rows[index])

    def column(self, index: int) -> list[int]:
        """Копия столбца index."""
        self._check_index("column", index)
        return [r[index] for r in self.rows]

    def to_lists(self) -> list[list[int]]:
        """Глубокая копия строк."""
        return [list(r) for r in self.rows]

    def copy(self) -> "Matrix":
        return Matrix(rows=self.to_lists())

    # -------------------------------------------------------------------------
    # Мутации (используются только Operation Engine)
    # -------------------------------------------------------------------------

    def swap_rows(self, r1: int, r2: int) -> None:
        """
        Обмен строк r1 и r2.

        Raises:
            OutOfBounds: Если любой индекс вне [0, N); матрица не изменяется
        """
        self._check_index("row", r1)
        self._check_index("row", r2)
        if r1 != r2:
            self.rows[r1], self.rows[r2] = self.rows[r2], self.rows[r1]

    def swap_columns(self, c1: int, c2: int) -> None:
        """
        Обмен столбцов c1 и c2 во всех строках.

        Raises:
            OutOfBounds: Если любой индекс вне [0, N); матрица не изменяется
        """
        self._check_index("column", c1)
        self._check_index("column", c2)
        if c1 != c2:
            for r in self.rows:
                r[c1], r[c2] = r[c2], r[c1]

    def set_cell(self, row: int, col: int, value: int) -> None:
        """
        Запись значения в ячейку (value усекается до int64).

        Raises:
            OutOfBounds: Если row или col вне [0, N)
        """
        self._check_index("row", row)
        self._check_index("column", col)
        self.rows[row][col] = wrap_int64(value)

    def _check_index(self, kind: str, index: int) -> None:
        if not self.contains(index):
            raise OutOfBounds(f"{kind} index {index} outside [0, {self.size})")
