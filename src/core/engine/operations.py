"""
Operation Engine: операции над матрицами хранилища

Арифметика (add, multiply, диагональные суммы) возвращает новые значения
и не изменяет входные матрицы. Структурные операции (swap_rows, swap_cols,
update_cell) изменяют матрицу на месте и сообщают об успехе bool-ом.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Вся арифметика: int64 с wraparound (каждое произведение и накопление)
2. Индексы проверяются ДО мутации: неуспех → False, матрица не изменена
3. r1 == r2 (c1 == c2): успешный no-op
"""

from src.core.domain.matrix import Matrix
from src.core.math.int64 import add_int64, mul_int64, sum_int64


def _require_same_size(a: Matrix, b: Matrix) -> int:
    if a.size != b.size:
        raise ValueError(f"Matrix sizes differ: {a.size} vs {b.size}")
    return a.size


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(a: Matrix, b: Matrix) -> Matrix:
    """
    Поэлементная сумма C = A + B.

    C[i][j] = wrap(A[i][j] + B[i][j])

    Raises:
        ValueError: Если размерности различаются
    """
    _require_same_size(a, b)
    return Matrix(
        rows=[
            [add_int64(x, y) for x, y in zip(row_a, row_b)]
            for row_a, row_b in zip(a.rows, b.rows)
        ]
    )


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Матричное произведение C = A * B.

    C[i][j] = Σ_k A[i][k] * B[k][j], порядок циклов i-k-j.
    Каждое произведение и каждое накопление усекаются до int64,
    результат совпадает с нативной 64-битной арифметикой.

    Сложность: O(N³) по времени, O(N²) дополнительной памяти.

    Raises:
        ValueError: Если размерности различаются
    """
    n = _require_same_size(a, b)
    result = [[0] * n for _ in range(n)]
    for i in range(n):
        row_a = a.rows[i]
        row_c = result[i]
        for k in range(n):
            a_ik = row_a[k]
            row_b = b.rows[k]
            for j in range(n):
                row_c[j] = add_int64(row_c[j], mul_int64(a_ik, row_b[j]))
    return Matrix(rows=result)


def main_diagonal_sum(m: Matrix) -> int:
    """Сумма главной диагонали: Σ M[i][i]."""
    return sum_int64(m.rows[i][i] for i in range(m.size))


def secondary_diagonal_sum(m: Matrix) -> int:
    """Сумма побочной диагонали: Σ M[i][N-1-i]."""
    n = m.size
    return sum_int64(m.rows[i][n - 1 - i] for i in range(n))


# =============================================================================
# СТРУКТУРНЫЕ ОПЕРАЦИИ
# =============================================================================


def swap_rows(m: Matrix, r1: int, r2: int) -> bool:
    """
    Обмен строк r1 и r2.

    Returns:
        False если r1 или r2 вне [0, N) (матрица не изменена), иначе True
    """
    if not (m.contains(r1) and m.contains(r2)):
        return False
    m.swap_rows(r1, r2)
    return True


def swap_cols(m: Matrix, c1: int, c2: int) -> bool:
    """
    Обмен столбцов c1 и c2.

    Returns:
        False если c1 или c2 вне [0, N) (матрица не изменена), иначе True
    """
    if not (m.contains(c1) and m.contains(c2)):
        return False
    m.swap_columns(c1, c2)
    return True


def update_cell(m: Matrix, row: int, col: int, value: int) -> bool:
    """
    Запись M[row][col] = value.

    Значение усекается до int64 в Matrix.set_cell, других ограничений нет.

    Returns:
        False если row или col вне [0, N), иначе True
    """
    if not (m.contains(row) and m.contains(col)):
        return False
    m.set_cell(row, col, value)
    return True
