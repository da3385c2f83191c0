"""
Parser/Loader: чтение N и двух матриц N×N из текстового источника

Формат: целые через любые пробельные символы (включая переводы строк):
    N
    N² целых: матрица A (row-major)
    N² целых: матрица B (row-major)

Лишний текст после B игнорируется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Успех → полностью заполненный MatrixStore, неуспех → LoadError
2. Частично прочитанные матрицы никогда не возвращаются
3. Файл закрывается на любом пути выхода (context manager)
"""

import logging
from pathlib import Path
from typing import Union

from src.core.domain import MatrixLabel, MatrixStore
from src.core.math.int64 import INT32_MAX, INT32_MIN, INT64_MAX, INT64_MIN
from src.core.math.parsing import NotANumber, OutOfRange, scan_int

logger = logging.getLogger(__name__)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class LoadError(Exception):
    """Базовая ошибка загрузки матриц."""

    pass


class SourceUnavailable(LoadError):
    """Источник не удалось открыть."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        self.reason = reason
        super().__init__("Error opening file.")


class InvalidDimension(LoadError):
    """N отсутствует, не число или N <= 0."""

    def __init__(self, token: str | None = None):
        self.token = token
        super().__init__("Invalid N.")


class TruncatedInput(LoadError):
    """
    Для матрицы не хватило целых.

    Чтение останавливается там, где в потоке нет целого int64,
    поэтому "received": число успешно прочитанных значений этой матрицы.
    """

    def __init__(self, label: MatrixLabel, expected: int, received: int):
        self.label = label
        self.expected = expected
        self.received = received
        super().__init__(f"Not enough numbers for {label.value}.")


# =============================================================================
# PARSING
# =============================================================================


def _first_word(text: str, pos: int) -> str | None:
    words = text[pos:].split(None, 1)
    return words[0] if words else None


def _read_dimension(text: str) -> tuple[int, int]:
    """N как native int > 0. Возвращает (N, позиция после N)."""
    try:
        size, pos = scan_int(text, 0, INT32_MIN, INT32_MAX)
    except (NotANumber, OutOfRange):
        raise InvalidDimension(_first_word(text, 0))
    if size <= 0:
        raise InvalidDimension(_first_word(text, 0))
    return size, pos


def _read_matrix(
    text: str, pos: int, size: int, label: MatrixLabel
) -> tuple[list[list[int]], int]:
    """N² значений int64 подряд из потока. Возвращает (строки, позиция после)."""
    expected = size * size
    values: list[int] = []
    while len(values) < expected:
        try:
            value, pos = scan_int(text, pos, INT64_MIN, INT64_MAX)
        except (NotANumber, OutOfRange):
            raise TruncatedInput(label, expected, len(values))
        values.append(value)
    return [values[i * size : (i + 1) * size] for i in range(size)], pos


def parse_matrices(text: str) -> MatrixStore:
    """
    Разбор текста в MatrixStore.

    Текст читается как единый поток целых: каждое значение начинается
    сразу после цифр предыдущего ("7x" даёт 7, следующее чтение
    начинается с "x").

    Args:
        text: Содержимое источника

    Returns:
        MatrixStore с A и B размера N×N

    Raises:
        InvalidDimension: N отсутствует, не целое или <= 0
        TruncatedInput: Для A или B не хватило целых
    """
    size, pos = _read_dimension(text)
    a_rows, pos = _read_matrix(text, pos, size, MatrixLabel.A)
    b_rows, _ = _read_matrix(text, pos, size, MatrixLabel.B)
    return MatrixStore.from_rows(a_rows, b_rows)


def load_matrices(path: Union[str, Path]) -> MatrixStore:
    """
    Загрузка матриц из файла.

    Файл открывается только на время чтения.

    Args:
        path: Путь к текстовому файлу

    Returns:
        MatrixStore

    Raises:
        SourceUnavailable: Файл не открылся или не читается как текст
        InvalidDimension, TruncatedInput: См. parse_matrices
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read matrix source %s: %s", path, e)
        raise SourceUnavailable(str(path), str(e)) from e

    try:
        store = parse_matrices(text)
    except LoadError as e:
        logger.warning("Matrix source %s rejected: %s", path, e)
        raise

    logger.debug("Loaded two %dx%d matrices from %s", store.size, store.size, path)
    return store
