"""
Width Selector — выбор "двойного" целого типа для промежуточных вычислений

Для разрядности W выбирается наименьший native беззнаковый тип шириной
не менее 2W бит. Произведение двух W-битных значений (и небольшая сумма
таких значений) гарантированно помещается в этот тип до редукции mod M.

Правила выбора (NATIVE_UINT_WIDTHS = 32, 64, 128):
    W = 32  → uint64
    W = 64  → uint128
    W = 128 → arbitrary precision (native типа нет)

Знаковый "двойной" тип строится из беззнакового той же ширины.
"""

from dataclasses import dataclass
from typing import Optional

from lcg_predict.core.config import NATIVE_UINT_WIDTHS


@dataclass(frozen=True)
class WideType:
    """
    Описание целого типа для промежуточных вычислений.

    bits=None означает arbitrary precision (без ограничений диапазона).
    """

    bits: Optional[int]
    signed: bool = False

    @property
    def is_arbitrary_precision(self) -> bool:
        return self.bits is None

    @property
    def min_value(self) -> Optional[int]:
        if self.bits is None:
            return None
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self) -> Optional[int]:
        if self.bits is None:
            return None
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, x: int) -> bool:
        """True если x представимо в этом типе."""
        if self.bits is None:
            return True
        return self.min_value <= x <= self.max_value


def least_doubled_uint(bits: int) -> WideType:
    """
    Наименьший native беззнаковый тип шириной >= 2 * bits.

    Args:
        bits: Разрядность исходного типа

    Returns:
        WideType (unsigned); arbitrary precision если native типа нет

    Raises:
        ValueError: Если bits не положительное целое

    Examples:
        >>> least_doubled_uint(32).bits
        64
        >>> least_doubled_uint(64).bits
        128
        >>> least_doubled_uint(128).is_arbitrary_precision
        True
    """
    if isinstance(bits, bool) or not isinstance(bits, int) or bits <= 0:
        raise ValueError(f"bits must be a positive int, got {bits!r}")

    for candidate in NATIVE_UINT_WIDTHS:
        if candidate >= 2 * bits:
            return WideType(bits=candidate, signed=False)

    return WideType(bits=None, signed=False)


def least_doubled_int(bits: int) -> WideType:
    """
    Знаковый тип той же ширины, что и least_doubled_uint(bits).

    Examples:
        >>> least_doubled_int(64)
        WideType(bits=128, signed=True)
    """
    unsigned = least_doubled_uint(bits)
    return WideType(bits=unsigned.bits, signed=True)
