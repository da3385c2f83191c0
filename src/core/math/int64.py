"""
Fixed-Width Integer Arithmetic: 64-bit wraparound

Значения ячеек матрицы: знаковые 64-битные целые. Python int не ограничен
по ширине, поэтому переполнение эмулируется явно: результат каждой
операции усекается до 64 бит (two's complement), перенос отбрасывается.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой функции модуля лежит в [INT64_MIN, INT64_MAX]
2. Переполнение: wraparound, НЕ saturating и НЕ exception
3. Все операции детерминированы
"""

from typing import Final, Iterable

# =============================================================================
# ГРАНИЦЫ ЦЕЛЫХ ТИПОВ
# =============================================================================

# Значения ячеек (long long)
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# Пункты меню и индексы (native int)
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1

_INT64_MODULUS: Final[int] = 2**64


# =============================================================================
# WRAPAROUND
# =============================================================================


def wrap_int64(value: int) -> int:
    """
    Усечение целого до знакового 64-битного диапазона.

    Args:
        value: Произвольное целое

    Returns:
        value по модулю 2**64, приведённое к [INT64_MIN, INT64_MAX]

    Examples:
        >>> wrap_int64(INT64_MAX + 1)
        -9223372036854775808
        >>> wrap_int64(-1)
        -1
    """
    value = value % _INT64_MODULUS
    if value > INT64_MAX:
        value -= _INT64_MODULUS
    return value


def is_int64(value: int) -> bool:
    """Проверка, что value помещается в int64 без усечения."""
    return INT64_MIN <= value <= INT64_MAX


def add_int64(a: int, b: int) -> int:
    """Сложение с wraparound."""
    return wrap_int64(a + b)


def mul_int64(a: int, b: int) -> int:
    """Умножение с wraparound."""
    return wrap_int64(a * b)


def sum_int64(values: Iterable[int]) -> int:
    """
    Сумма последовательности с wraparound.

    Промежуточный wrap не нужен: сложение по модулю 2**64 ассоциативно,
    поэтому достаточно усечь итоговую сумму.
    """
    return wrap_int64(sum(values))
