"""
lcg_predict — skip-ahead предсказание линейных конгруэнтных генераторов

Выход LCG x' = (a*x + c) mod m через n шагов вычисляется за O(log n)
композиций аффинного отображения вместо n последовательных шагов.
"""

from lcg_predict.core.domain import (
    AffineTransform,
    LCGEngine,
    LCGPreset,
    ModulusMismatchError,
    compose,
)
from lcg_predict.core.math import ModularArithmetic, double_and_add

__all__ = [
    "AffineTransform",
    "LCGEngine",
    "LCGPreset",
    "ModularArithmetic",
    "ModulusMismatchError",
    "compose",
    "double_and_add",
]
