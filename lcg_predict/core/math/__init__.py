"""
Core math modules для lcg_predict

Модульная арифметика над беззнаковым доменом ширины W и обобщённое
быстрое возведение в степень.
"""

# Width Selector
from lcg_predict.core.math.width import (
    WideType,
    least_doubled_int,
    least_doubled_uint,
)

# Fast Combine
from lcg_predict.core.math.fast_combine import double_and_add

# Modular Arithmetic
from lcg_predict.core.math.modular import (
    ModularArithmetic,
    true_modulus,
    validate_modulus,
)

# Number Theory
from lcg_predict.core.math.number_theory import (
    ExtendedGCDResult,
    gcd_ext,
    inv_mod,
)

__all__ = [
    # Width Selector
    "WideType",
    "least_doubled_int",
    "least_doubled_uint",
    # Fast Combine
    "double_and_add",
    # Modular Arithmetic
    "ModularArithmetic",
    "true_modulus",
    "validate_modulus",
    # Number Theory
    "ExtendedGCDResult",
    "gcd_ext",
    "inv_mod",
]
