"""
Validation — сверка skip-ahead предсказания с последовательной симуляцией
и опубликованными таблицами выходов.
"""

from .cross_check import (
    CrossCheckResult,
    cross_check,
    cross_check_preset,
    predict_sequence,
    simulate_sequence,
)

__all__ = [
    "CrossCheckResult",
    "cross_check",
    "cross_check_preset",
    "predict_sequence",
    "simulate_sequence",
]
