"""Cross-check — сверка предсказания, симуляции и эталонных таблиц.

Центральное свойство: для любого движка E и n >= 0
    E.value_after_n_steps(n) == состояние после n вызовов E.step()

predict_sequence считает шаги 1..k через skip-ahead (O(log n) каждый),
simulate_sequence — последовательными шагами на копии движка.
Исходный движок не изменяется.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from lcg_predict.core.config import validate_step_count
from lcg_predict.core.domain.engine import LCGEngine
from lcg_predict.core.domain.preset import LCGPreset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CrossCheckResult:
    """Результат сверки."""

    steps: int
    predicted: tuple[int, ...]
    simulated: tuple[int, ...]
    reference: Optional[tuple[int, ...]]

    prediction_matches_simulation: bool
    matches_reference: Optional[bool]

    # Первый шаг (1-based), на котором последовательности разошлись
    first_mismatch_step: Optional[int]

    details: str

    @property
    def passed(self) -> bool:
        return self.prediction_matches_simulation and self.matches_reference is not False


def predict_sequence(engine: LCGEngine, steps: int) -> list[int]:
    """Выходы шагов 1..steps через value_after_n_steps."""
    validate_step_count(steps, "steps")
    return [engine.value_after_n_steps(i + 1) for i in range(steps)]


def simulate_sequence(engine: LCGEngine, steps: int) -> list[int]:
    """Выходы шагов 1..steps последовательной симуляцией на копии движка."""
    validate_step_count(steps, "steps")
    runner = engine.copy()
    return [runner.step() for _ in range(steps)]


def _first_mismatch(left: Sequence[int], right: Sequence[int]) -> Optional[int]:
    for i, (x, y) in enumerate(zip(left, right)):
        if x != y:
            return i + 1
    if len(left) != len(right):
        return min(len(left), len(right)) + 1
    return None


def cross_check(
    engine: LCGEngine,
    steps: int,
    reference: Optional[Sequence[int]] = None
) -> CrossCheckResult:
    """Сверка предсказания с симуляцией и (опционально) с эталоном.

    Args:
        engine: движок (не изменяется)
        steps: число шагов для сверки
        reference: эталонные выходы шагов 1..len(reference); сравниваются
            с префиксом предсказания

    Returns:
        CrossCheckResult
    """
    predicted = tuple(predict_sequence(engine, steps))
    simulated = tuple(simulate_sequence(engine, steps))

    mismatch = _first_mismatch(predicted, simulated)
    prediction_matches_simulation = mismatch is None

    matches_reference: Optional[bool] = None
    reference_tuple: Optional[tuple[int, ...]] = None
    if reference is not None:
        reference_tuple = tuple(reference)
        reference_mismatch = _first_mismatch(predicted[:len(reference_tuple)], reference_tuple)
        matches_reference = reference_mismatch is None
        if mismatch is None:
            mismatch = reference_mismatch

    if mismatch is None:
        details = f"{steps} steps consistent"
    else:
        details = (
            f"Mismatch at step {mismatch}: prediction_matches_simulation="
            f"{prediction_matches_simulation}, matches_reference={matches_reference}"
        )
        logger.warning("Cross-check failed for %r: %s", engine, details)

    return CrossCheckResult(
        steps=steps,
        predicted=predicted,
        simulated=simulated,
        reference=reference_tuple,
        prediction_matches_simulation=prediction_matches_simulation,
        matches_reference=matches_reference,
        first_mismatch_step=mismatch,
        details=details,
    )


def cross_check_preset(preset: LCGPreset, steps: Optional[int] = None) -> CrossCheckResult:
    """Сверка пресета (seed = 1) с его опубликованной таблицей выходов.

    Args:
        preset: конфигурация генератора
        steps: число шагов (default: длина эталонной таблицы)
    """
    if steps is None:
        steps = len(preset.reference_outputs)
    return cross_check(LCGEngine.from_preset(preset), steps, preset.reference_outputs)
