"""
Integer Parsing: разбор целых из пользовательского ввода

Разбор ведётся как потоковое извлечение целого: пропуск ведущих пробелов,
необязательный знак, десятичные цифры. Текст после цифр не анализируется
(например, "3abc" → 3), следующее поле читается сразу за цифрами.

Диапазоны:
- Пункты меню, селектор матрицы, индексы: native int (32 бита)
- Значение ячейки: int64
"""

import re
from typing import Final

from src.core.math.int64 import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN

# =============================================================================
# EXCEPTIONS
# =============================================================================


class NotANumber(ValueError):
    """В тексте нет ни одной цифры в позиции, где ожидается целое."""

    pass


class OutOfRange(ValueError):
    """Разобранное целое не помещается в допустимый диапазон."""

    pass


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

INT32_BOUNDS: Final[tuple[int, int]] = (INT32_MIN, INT32_MAX)
INT64_BOUNDS: Final[tuple[int, int]] = (INT64_MIN, INT64_MAX)

_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


# =============================================================================
# PARSING
# =============================================================================


def scan_int(text: str, pos: int, min_value: int, max_value: int) -> tuple[int, int]:
    """
    Извлечение одного целого начиная с pos.

    Returns:
        (value, end): end указывает на первый символ после цифр,
        с него начинается следующее извлечение

    Raises:
        NotANumber: Если после пробелов нет знака и цифр
        OutOfRange: Если значение вне [min_value, max_value]
    """
    match = _INT_PREFIX.match(text, pos)
    if match is None:
        raise NotANumber(f"Expected an integer at position {pos}: {text[pos:]!r}")

    digits = match.group(1)
    try:
        value = int(digits)
    except ValueError:
        # int() отказывается от слишком длинных строк цифр
        raise OutOfRange(f"Integer literal too long: {len(digits)} characters")

    if value < min_value or value > max_value:
        raise OutOfRange(f"Integer {value} outside [{min_value}, {max_value}]")

    return value, match.end()


def parse_int(
    text: str,
    min_value: int = INT32_MIN,
    max_value: int = INT32_MAX,
) -> int:
    """
    Разбор одного целого из строки.

    Args:
        text: Строка ввода
        min_value: Нижняя граница (default: INT32_MIN)
        max_value: Верхняя граница (default: INT32_MAX)

    Returns:
        Разобранное целое

    Raises:
        NotANumber: Если цифры не найдены
        OutOfRange: Если значение вне [min_value, max_value]

    Examples:
        >>> parse_int("  42")
        42
        >>> parse_int("-7 trailing")
        -7
        >>> parse_int("abc")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        NotANumber: ...
    """
    value, _ = scan_int(text, 0, min_value, max_value)
    return value


def parse_int_fields(text: str, *bounds: tuple[int, int]) -> tuple[int, ...]:
    """
    Последовательный разбор нескольких целых из одной строки.

    Каждому полю соответствует свой диапазон (min, max). Поля читаются
    подряд, как из потока: "1 2" → (1, 2), "1,2" → NotANumber на втором поле.

    Args:
        text: Строка ввода
        *bounds: Диапазон для каждого поля

    Returns:
        Кортеж разобранных значений (len == len(bounds))

    Raises:
        NotANumber, OutOfRange: Для первого некорректного поля
    """
    values = []
    pos = 0
    for min_value, max_value in bounds:
        value, pos = scan_int(text, pos, min_value, max_value)
        values.append(value)
    return tuple(values)
