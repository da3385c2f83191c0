"""Конфигурация интерактивной сессии."""

from dataclasses import dataclass

from src.core.io.formatter import DEFAULT_CELL_WIDTH


@dataclass(frozen=True)
class SessionConfig:
    """
    Параметры вывода сессии.

    - cell_width: ширина поля ячейки при выводе матриц (>= 1)
    """

    cell_width: int = DEFAULT_CELL_WIDTH

    def __post_init__(self):
        if self.cell_width < 1:
            raise ValueError(f"cell_width must be positive, got {self.cell_width}")
