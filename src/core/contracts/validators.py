"""
JSON Schema Contract Validators

Проверка JSON снапшотов состояния калькулятора по схемам из schema/ рядом с модулем.

Схемы:
- matrix_store.json: снапшот MatrixStore {"N", "A", "B"}

Связь "каждая матрица ровно N×N" в JSON Schema не выражается,
поэтому MatrixStoreValidator проверяет её после схемы.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Union

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

# Схемы поставляются как package data src.core.contracts
DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение и meta-validation JSON Schema файлов с кэшем по имени схемы.
    """

    def __init__(self, schema_dir: Optional[Union[str, Path]] = None):
        self.schema_dir = Path(schema_dir) if schema_dir is not None else DEFAULT_SCHEMA_DIR
        if not self.schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self.schema_dir}")
        self._cache: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Схема по имени без расширения ('matrix_store').

        Raises:
            FileNotFoundError: Файла <schema_name>.json нет
            ValueError: Файл не является корректной Draft 2020-12 схемой
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self.schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


@lru_cache(maxsize=None)
def default_loader() -> SchemaLoader:
    """Общий загрузчик для схем проекта."""
    return SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Валидатор данных против одной именованной схемы."""

    def __init__(self, schema_name: str, loader: Optional[SchemaLoader] = None):
        self.schema_name = schema_name
        self.schema = (loader or default_loader()).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        try:
            self.validate(data)
        except ValidationError:
            return False
        return True

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Все нарушения схемы (без дополнительных проверок подклассов)."""
        return self._validator.iter_errors(data)


class MatrixStoreValidator(ContractValidator):
    """Контракт matrix_store: схема + размеры N×N."""

    def __init__(self, loader: Optional[SchemaLoader] = None):
        super().__init__("matrix_store", loader)

    def validate(self, data: Dict[str, Any]) -> None:
        super().validate(data)
        size = data["N"]
        for label in ("A", "B"):
            rows = data[label]
            if len(rows) != size or any(len(row) != size for row in rows):
                raise ValidationError(f"Matrix {label} is not {size}x{size}")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_matrix_store(data: Dict[str, Any]) -> None:
    """
    Проверка снапшота MatrixStore.to_contract().

    Raises:
        ValidationError: Снапшот не соответствует контракту
    """
    MatrixStoreValidator().validate(data)
