"""
Contract Validation Module

Модуль для валидации JSON контрактов: пресеты генераторов и снапшоты движка.
"""

from .validators import (
    ContractValidator,
    EngineSnapshotValidator,
    LCGPresetValidator,
    SchemaLoader,
    validate_engine_snapshot,
    validate_lcg_preset,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "LCGPresetValidator",
    "EngineSnapshotValidator",
    # Functions
    "validate_lcg_preset",
    "validate_engine_snapshot",
]
