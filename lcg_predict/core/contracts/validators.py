"""
JSON Schema Contract Validators — внешние представления LCG

Контракты проверяют структуру данных, пересекающих границу пакета, до того
как они попадут в Pydantic модели и алгебраическое ядро:

- lcg_preset.json: запись presets.json. Параметры (a, c, m, width)
  генератора x' = (a*x + c) mod M и таблица опубликованных выходов после
  seed = 1. Проверяются типы (целые, не bool), неотрицательность,
  width ∈ {32, 64, 128}, формат имени, отсутствие лишних ключей.
- engine_snapshot.json: снапшот LCGEngine (a, c, m, width, state) для
  LCGEngine.from_snapshot.

Контракт проверяет только форму. Доменные ограничения (m < 2^width,
выходы ∈ [0, M)) проверяет LCGPreset, а нормализацию по модулю
выполняет AffineTransform.
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в schema/ рядом с этим модулем (package data).
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'lcg_preset')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Схема загружается один раз через общий SchemaLoader; Draft 2020-12.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class LCGPresetValidator(ContractValidator):
    """Валидатор записи presets.json (контракт lcg_preset)."""

    def __init__(self):
        super().__init__("lcg_preset")


class EngineSnapshotValidator(ContractValidator):
    """Валидатор снапшота LCGEngine (контракт engine_snapshot)."""

    def __init__(self):
        super().__init__("engine_snapshot")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_lcg_preset(data: Dict[str, Any]) -> None:
    """
    Валидация записи пресета.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    LCGPresetValidator().validate(data)


def validate_engine_snapshot(data: Dict[str, Any]) -> None:
    """
    Валидация снапшота движка.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    EngineSnapshotValidator().validate(data)
