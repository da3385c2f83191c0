"""
Formatter: текстовое представление результатов

Матрица выводится строками из полей фиксированной ширины с выравниванием
вправо. Значения шире поля не обрезаются.
"""

from typing import Final

from src.core.domain import Matrix

DEFAULT_CELL_WIDTH: Final[int] = 6


def format_matrix(matrix: Matrix, title: str = "", width: int = DEFAULT_CELL_WIDTH) -> str:
    """
    Форматирование матрицы.

    Args:
        matrix: Матрица для вывода
        title: Заголовок (пустой: без строки заголовка)
        width: Ширина поля одной ячейки

    Returns:
        Многострочный текст, каждая строка завершается "\\n"

    Examples:
        >>> print(format_matrix(Matrix(rows=[[1, 2], [3, 4]]), "A:"), end="")
        A:
             1     2
             3     4
    """
    lines = []
    if title:
        lines.append(title)
    for row in matrix.rows:
        lines.append("".join(f"{value:>{width}}" for value in row))
    return "".join(line + "\n" for line in lines)


def format_diagonal_sums(main: int, secondary: int) -> str:
    """Вывод обеих диагональных сумм."""
    return f"Main: {main}\nSecondary: {secondary}\n"
