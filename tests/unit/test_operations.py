"""
Тесты для Operation Engine

Проверяемые инварианты:
1. add/multiply: int64 с wraparound, входы не изменяются
2. Дистрибутивность: A*(B+C) == A*B + A*C (кольцо вычетов по модулю 2**64)
3. Диагональные суммы, включая N=1 и нечётный N
4. swap(i, i): no-op, двойной swap восстанавливает матрицу
5. Индексы вне [0, N) → False, матрица не изменена
"""

import pytest

from src.core.domain import Matrix
from src.core.engine import (
    add,
    main_diagonal_sum,
    multiply,
    secondary_diagonal_sum,
    swap_cols,
    swap_rows,
    update_cell,
)
from src.core.math.int64 import INT64_MAX, INT64_MIN


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def a():
    return Matrix(rows=[[1, 2], [3, 4]])


@pytest.fixture
def b():
    return Matrix(rows=[[5, 6], [7, 8]])


@pytest.fixture
def m3():
    """3×3 матрица 1..9."""
    return Matrix(rows=[[1, 2, 3], [4, 5, 6], [7, 8, 9]])


# =============================================================================
# ТЕСТЫ: Сценарий из файла "2\n1 2\n3 4\n5 6\n7 8\n"
# =============================================================================


class TestReferenceScenario:
    """Эталонные значения для A=[[1,2],[3,4]], B=[[5,6],[7,8]]."""

    def test_add(self, a, b):
        assert add(a, b).rows == [[6, 8], [10, 12]]

    def test_multiply(self, a, b):
        assert multiply(a, b).rows == [[19, 22], [43, 50]]

    def test_main_diagonal(self, a):
        assert main_diagonal_sum(a) == 5

    def test_secondary_diagonal(self, a):
        assert secondary_diagonal_sum(a) == 5

    def test_update_then_read(self, a):
        assert update_cell(a, 0, 0, 99) is True
        assert a.get(0, 0) == 99

    def test_swap_rows_out_of_bounds(self, a):
        assert swap_rows(a, 0, 5) is False
        assert a.rows == [[1, 2], [3, 4]]


# =============================================================================
# ТЕСТЫ: Арифметика
# =============================================================================


class TestAdd:
    """Поэлементное сложение."""

    def test_elementwise(self, m3):
        other = Matrix(rows=[[9, 8, 7], [6, 5, 4], [3, 2, 1]])
        result = add(m3, other)
        for i in range(3):
            for j in range(3):
                assert result.get(i, j) == m3.get(i, j) + other.get(i, j)

    def test_wraparound(self):
        result = add(Matrix(rows=[[INT64_MAX]]), Matrix(rows=[[1]]))
        assert result.rows == [[INT64_MIN]]

    def test_negative_wraparound(self):
        result = add(Matrix(rows=[[INT64_MIN]]), Matrix(rows=[[-1]]))
        assert result.rows == [[INT64_MAX]]

    def test_inputs_unchanged(self, a, b):
        add(a, b)
        assert a.rows == [[1, 2], [3, 4]]
        assert b.rows == [[5, 6], [7, 8]]

    def test_size_mismatch(self, a):
        with pytest.raises(ValueError, match="sizes differ"):
            add(a, Matrix(rows=[[1]]))


class TestMultiply:
    """Матричное произведение."""

    def test_identity(self, m3):
        identity = Matrix(rows=[[1, 0, 0], [0, 1, 0], [0, 0, 1]])
        assert multiply(m3, identity) == m3
        assert multiply(identity, m3) == m3

    def test_zero(self, m3):
        assert multiply(m3, Matrix.zeros(3)) == Matrix.zeros(3)

    def test_3x3(self, m3):
        assert multiply(m3, m3).rows == [
            [30, 36, 42],
            [66, 81, 96],
            [102, 126, 150],
        ]

    def test_product_wraparound(self):
        """2**32 * 2**32 = 2**64 → 0."""
        result = multiply(Matrix(rows=[[2**32]]), Matrix(rows=[[2**32]]))
        assert result.rows == [[0]]

    def test_accumulation_wraparound(self):
        """MAX*1 + 1*1 переполняет накопитель."""
        lhs = Matrix(rows=[[INT64_MAX, 1], [0, 0]])
        rhs = Matrix(rows=[[1, 0], [1, 0]])
        assert multiply(lhs, rhs).rows == [[INT64_MIN, 0], [0, 0]]

    def test_inputs_unchanged(self, a, b):
        multiply(a, b)
        assert a.rows == [[1, 2], [3, 4]]
        assert b.rows == [[5, 6], [7, 8]]

    def test_size_mismatch(self, a):
        with pytest.raises(ValueError, match="sizes differ"):
            multiply(a, Matrix.zeros(3))

    def test_distributive_over_add(self, a, b):
        c = Matrix(rows=[[-1, 0], [2, 9]])
        assert multiply(a, add(b, c)) == add(multiply(a, b), multiply(a, c))

    def test_distributive_with_overflow(self):
        """Дистрибутивность сохраняется и при переполнении."""
        a = Matrix(rows=[[INT64_MAX, 3], [-7, INT64_MIN]])
        b = Matrix(rows=[[INT64_MAX, INT64_MAX], [2, -5]])
        c = Matrix(rows=[[1, INT64_MIN], [INT64_MAX, 11]])
        assert multiply(a, add(b, c)) == add(multiply(a, b), multiply(a, c))


# =============================================================================
# ТЕСТЫ: Диагональные суммы
# =============================================================================


class TestDiagonalSums:
    """Главная и побочная диагонали."""

    def test_single_cell(self):
        m = Matrix(rows=[[-42]])
        assert main_diagonal_sum(m) == -42
        assert secondary_diagonal_sum(m) == -42

    def test_3x3(self, m3):
        assert main_diagonal_sum(m3) == 15
        assert secondary_diagonal_sum(m3) == 15

    def test_odd_size_counts_center_twice(self, m3):
        """Для нечётного N центр входит в обе суммы."""
        distinct_cells = 1 + 5 + 9 + 3 + 7
        center = m3.get(1, 1)
        assert main_diagonal_sum(m3) + secondary_diagonal_sum(m3) == distinct_cells + center

    def test_wraparound(self):
        m = Matrix(rows=[[INT64_MAX, 0], [0, 1]])
        assert main_diagonal_sum(m) == INT64_MIN
        assert secondary_diagonal_sum(m) == 0


# =============================================================================
# ТЕСТЫ: Структурные операции
# =============================================================================


class TestSwapRows:
    """Обмен строк."""

    def test_swap(self, m3):
        assert swap_rows(m3, 0, 2) is True
        assert m3.rows == [[7, 8, 9], [4, 5, 6], [1, 2, 3]]

    @pytest.mark.parametrize("i", [0, 1, 2])
    def test_same_index_noop(self, m3, i):
        before = m3.to_lists()
        assert swap_rows(m3, i, i) is True
        assert m3.rows == before

    def test_involution(self, m3):
        before = m3.to_lists()
        swap_rows(m3, 0, 1)
        swap_rows(m3, 1, 0)
        assert m3.rows == before

    @pytest.mark.parametrize("r1, r2", [(-1, 0), (0, -1), (3, 0), (0, 3), (5, 5)])
    def test_out_of_bounds(self, m3, r1, r2):
        before = m3.to_lists()
        assert swap_rows(m3, r1, r2) is False
        assert m3.rows == before


class TestSwapCols:
    """Обмен столбцов."""

    def test_swap(self, a):
        assert swap_cols(a, 0, 1) is True
        assert a.rows == [[2, 1], [4, 3]]

    def test_same_index_noop(self, m3):
        before = m3.to_lists()
        assert swap_cols(m3, 2, 2) is True
        assert m3.rows == before

    def test_involution(self, m3):
        before = m3.to_lists()
        swap_cols(m3, 0, 2)
        swap_cols(m3, 2, 0)
        assert m3.rows == before

    @pytest.mark.parametrize("c1, c2", [(-1, 0), (0, -1), (3, 0), (0, 3)])
    def test_out_of_bounds(self, m3, c1, c2):
        before = m3.to_lists()
        assert swap_cols(m3, c1, c2) is False
        assert m3.rows == before


class TestUpdateCell:
    """Запись значения в ячейку."""

    def test_update(self, m3):
        assert update_cell(m3, 2, 1, -100) is True
        assert m3.get(2, 1) == -100
        assert m3.get(1, 2) == 6

    def test_extreme_values(self, a):
        assert update_cell(a, 0, 1, INT64_MIN) is True
        assert update_cell(a, 1, 0, INT64_MAX) is True
        assert a.rows == [[1, INT64_MIN], [INT64_MAX, 4]]

    def test_value_wraps(self, a):
        assert update_cell(a, 0, 0, INT64_MAX + 2) is True
        assert a.get(0, 0) == INT64_MIN + 1

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (2, 0), (0, 2), (2, 2)])
    def test_out_of_bounds(self, a, row, col):
        assert update_cell(a, row, col, 7) is False
        assert a.rows == [[1, 2], [3, 4]]
