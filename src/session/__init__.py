"""Session: интерактивная работа с парой матриц A, B.

- SessionContext: источник и текущее хранилище, reload all-or-nothing
- MatrixSession: меню и диспетчеризация в Operation Engine
"""

from .config import SessionConfig
from .context import SessionContext
from .controller import MENU_TEXT, MatrixSession, MenuOption

__all__ = [
    "SessionConfig",
    "SessionContext",
    "MatrixSession",
    "MenuOption",
    "MENU_TEXT",
]
