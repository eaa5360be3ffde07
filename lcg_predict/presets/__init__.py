"""
Presets — именованные конфигурации известных генераторов

Чистые данные (presets.json): параметры a, c, m, width и опубликованные
таблицы первых выходов. Каждая запись проходит валидацию контрактом
lcg_preset.json и затем Pydantic моделью LCGPreset.

Алгебраическое ядро ничего не знает о конкретных генераторах.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from lcg_predict.core.contracts import validate_lcg_preset
from lcg_predict.core.domain.preset import LCGPreset

logger = logging.getLogger(__name__)

PRESETS_PATH = Path(__file__).parent / "presets.json"


class PresetNotFoundError(KeyError):
    """Запрошен неизвестный пресет."""

    pass


# Кэш пресетов из PRESETS_PATH
_PRESETS: Dict[str, LCGPreset] = {}


def load_presets(path: Optional[Path] = None) -> Dict[str, LCGPreset]:
    """
    Загрузка и валидация пресетов.

    Args:
        path: JSON файл с ключом "presets" (default: встроенный presets.json)

    Returns:
        Словарь name → LCGPreset в порядке файла

    Raises:
        FileNotFoundError: Если файл не найден
        ValidationError: Если запись нарушает контракт lcg_preset
        ValueError: Если имена пресетов повторяются
    """
    if path is None and _PRESETS:
        return dict(_PRESETS)

    source = path or PRESETS_PATH
    with open(source, "r", encoding="utf-8") as f:
        raw = json.load(f)

    presets: Dict[str, LCGPreset] = {}
    for record in raw.get("presets", []):
        validate_lcg_preset(record)
        preset = LCGPreset.model_validate(record)
        if preset.name in presets:
            raise ValueError(f"Duplicate preset name '{preset.name}' in {source}")
        presets[preset.name] = preset

    logger.debug("Loaded %d LCG presets from %s", len(presets), source)

    if path is None:
        _PRESETS.update(presets)
    return presets


def get_preset(name: str) -> LCGPreset:
    """
    Пресет по имени.

    Raises:
        PresetNotFoundError: Если пресет не найден
    """
    presets = load_presets()
    try:
        return presets[name]
    except KeyError:
        raise PresetNotFoundError(
            f"Unknown preset '{name}', available: {sorted(presets)}"
        ) from None


def preset_names() -> list[str]:
    """Имена встроенных пресетов."""
    return list(load_presets())


__all__ = [
    "PRESETS_PATH",
    "PresetNotFoundError",
    "get_preset",
    "load_presets",
    "preset_names",
]
