"""Контекст сессии: путь к источнику и текущее хранилище матриц."""

import logging
from dataclasses import dataclass

from src.core.domain import MatrixStore
from src.core.io.loader import load_matrices

logger = logging.getLogger(__name__)


@dataclass
class SessionContext:
    """
    Состояние одной сессии.

    Создаётся успешной загрузкой, store заменяется целиком при reload.
    """

    source_path: str
    store: MatrixStore

    @classmethod
    def open(cls, source_path: str) -> "SessionContext":
        """
        Первичная загрузка.

        Raises:
            LoadError: Источник не открылся или некорректен
        """
        return cls(source_path=source_path, store=load_matrices(source_path))

    def reload(self) -> MatrixStore:
        """
        Перечитать источник (all-or-nothing).

        При LoadError текущий store остаётся нетронутым, ошибка пробрасывается.
        Ручные правки матриц при успешном reload теряются.
        """
        store = load_matrices(self.source_path)
        self.store = store
        logger.debug("Reloaded %s", self.source_path)
        return store
