"""
Contract Validation Module

Модуль для валидации JSON снапшотов состояния калькулятора.
"""

from .validators import (
    ContractValidator,
    MatrixStoreValidator,
    SchemaLoader,
    default_loader,
    validate_matrix_store,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MatrixStoreValidator",
    # Functions
    "default_loader",
    "validate_matrix_store",
]
