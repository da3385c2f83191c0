"""
Session Controller: интерактивное меню калькулятора

Цикл: меню → выбор пункта → ввод аргументов → вызов Operation Engine →
вывод результата. Весь ввод-вывод идёт через переданные потоки, поэтому
сессию можно гонять на io.StringIO.

Обработка ввода:
- Нечисловой пункт меню → "Invalid option.", меню заново
- Неизвестный пункт → "Unknown option."
- Некорректный выбор матрицы → "Invalid."
- Некорректные аргументы → "Invalid input."
- Индексы вне [0, N) → "Out of bounds.", матрица не изменена
- EOF на любом приглашении → нормальное завершение сессии
"""

import logging
import sys
from enum import IntEnum
from typing import Optional, TextIO

from src.core.domain import MatrixLabel
from src.core.engine import (
    add,
    main_diagonal_sum,
    multiply,
    secondary_diagonal_sum,
    swap_cols,
    swap_rows,
    update_cell,
)
from src.core.io.formatter import format_diagonal_sums, format_matrix
from src.core.io.loader import LoadError
from src.core.math.parsing import (
    INT32_BOUNDS,
    INT64_BOUNDS,
    NotANumber,
    OutOfRange,
    parse_int,
    parse_int_fields,
)

from .config import SessionConfig
from .context import SessionContext

logger = logging.getLogger(__name__)


class MenuOption(IntEnum):
    """Пункты меню."""

    EXIT = 0
    ADD = 1
    MULTIPLY = 2
    DIAGONAL_SUMS = 3
    SWAP_ROWS = 4
    SWAP_COLS = 5
    UPDATE_CELL = 6
    RELOAD = 7


MENU_TEXT = (
    "\n1) Add (A+B)\n"
    "2) Multiply (A*B)\n"
    "3) Diagonal sums (pick A/B)\n"
    "4) Swap rows (pick A/B)\n"
    "5) Swap cols (pick A/B)\n"
    "6) Update cell (pick A/B)\n"
    "7) Reload file\n"
    "0) Exit\n"
    "Select: "
)

MATRIX_SELECTORS = {1: MatrixLabel.A, 2: MatrixLabel.B}


class _EndOfInput(Exception):
    """Входной поток закончился посреди диалога."""


class MatrixSession:
    """Интерактивная сессия над одним SessionContext."""

    def __init__(
        self,
        context: SessionContext,
        config: Optional[SessionConfig] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.context = context
        self.config = config or SessionConfig()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    # -------------------------------------------------------------------------
    # Цикл
    # -------------------------------------------------------------------------

    def run(self) -> None:
        """Крутить меню до выбора 0 или EOF."""
        while True:
            try:
                line = self._prompt(MENU_TEXT)
            except _EndOfInput:
                break

            try:
                choice = parse_int(line)
            except (NotANumber, OutOfRange):
                self._write("Invalid option.\n")
                continue

            if choice == MenuOption.EXIT:
                self._write("Bye.\n")
                break

            try:
                self.dispatch(choice)
            except _EndOfInput:
                break

    def dispatch(self, choice: int) -> None:
        """Выполнение одного пункта меню (кроме EXIT)."""
        handlers = {
            MenuOption.ADD: self._add,
            MenuOption.MULTIPLY: self._multiply,
            MenuOption.DIAGONAL_SUMS: self._diagonal_sums,
            MenuOption.SWAP_ROWS: self._swap_rows,
            MenuOption.SWAP_COLS: self._swap_cols,
            MenuOption.UPDATE_CELL: self._update_cell,
            MenuOption.RELOAD: self._reload,
        }
        handler = handlers.get(choice)
        if handler is None:
            self._write("Unknown option.\n")
            return
        logger.debug("Menu option %s", MenuOption(choice).name)
        handler()

    # -------------------------------------------------------------------------
    # Пункты меню
    # -------------------------------------------------------------------------

    def _add(self) -> None:
        store = self.context.store
        self._show(add(store.a, store.b), "A + B:")

    def _multiply(self) -> None:
        store = self.context.store
        self._show(multiply(store.a, store.b), "A * B:")

    def _diagonal_sums(self) -> None:
        label = self._choose_matrix()
        if label is None:
            self._write("Invalid.\n")
            return
        matrix = self.context.store.get(label)
        self._write(
            format_diagonal_sums(main_diagonal_sum(matrix), secondary_diagonal_sum(matrix))
        )

    def _swap_rows(self) -> None:
        label = self._choose_matrix()
        if label is None:
            self._write("Invalid.\n")
            return
        fields = self._read_fields("Enter r1 r2 (0-based): ", INT32_BOUNDS, INT32_BOUNDS)
        if fields is None:
            return
        matrix = self.context.store.get(label)
        if not swap_rows(matrix, *fields):
            self._write("Out of bounds.\n")
            return
        self._show(matrix, "After row swap:")

    def _swap_cols(self) -> None:
        label = self._choose_matrix()
        if label is None:
            self._write("Invalid.\n")
            return
        fields = self._read_fields("Enter c1 c2 (0-based): ", INT32_BOUNDS, INT32_BOUNDS)
        if fields is None:
            return
        matrix = self.context.store.get(label)
        if not swap_cols(matrix, *fields):
            self._write("Out of bounds.\n")
            return
        self._show(matrix, "After col swap:")

    def _update_cell(self) -> None:
        label = self._choose_matrix()
        if label is None:
            self._write("Invalid.\n")
            return
        fields = self._read_fields(
            "Enter r c value (0-based): ", INT32_BOUNDS, INT32_BOUNDS, INT64_BOUNDS
        )
        if fields is None:
            return
        matrix = self.context.store.get(label)
        if not update_cell(matrix, *fields):
            self._write("Out of bounds.\n")
            return
        self._show(matrix, "After update:")

    def _reload(self) -> None:
        try:
            store = self.context.reload()
        except LoadError as e:
            logger.warning("Reload of %s failed: %s", self.context.source_path, e)
            self._write(f"{e}\nReload failed.\n")
            return
        self._write("Reloaded.\n")
        self._show(store.a, "Matrix A:")
        self._show(store.b, "Matrix B:")

    # -------------------------------------------------------------------------
    # Ввод-вывод
    # -------------------------------------------------------------------------

    def _choose_matrix(self) -> Optional[MatrixLabel]:
        line = self._prompt("Choose matrix (1=A, 2=B): ")
        try:
            return MATRIX_SELECTORS.get(parse_int(line))
        except (NotANumber, OutOfRange):
            return None

    def _read_fields(self, prompt: str, *bounds: tuple[int, int]) -> Optional[tuple[int, ...]]:
        line = self._prompt(prompt)
        try:
            return parse_int_fields(line, *bounds)
        except (NotANumber, OutOfRange):
            self._write("Invalid input.\n")
            return None

    def _prompt(self, text: str) -> str:
        self._write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise _EndOfInput()
        return line.rstrip("\r\n")

    def _show(self, matrix, title: str) -> None:
        self._write(format_matrix(matrix, title, self.config.cell_width))

    def _write(self, text: str) -> None:
        self.stdout.write(text)
