"""
Number Theory — расширенный алгоритм Евклида и обратный элемент mod M

Используется для обратного хода LCG: f^-1(x) = a^-1 * (x - c) mod M.

Отсутствие обратного элемента (gcd(a, M) != 1) — не ошибка,
а валидный результат: inv_mod возвращает None.
"""

from typing import NamedTuple, Optional

from lcg_predict.core.math.modular import ModularArithmetic


class ExtendedGCDResult(NamedTuple):
    """gcd(a, b) = d = a*x + b*y"""

    d: int
    x: int
    y: int


def gcd_ext(a: int, b: int) -> ExtendedGCDResult:
    """
    Расширенный алгоритм Евклида для неотрицательных a, b.

    Args:
        a: Первое число (>= 0)
        b: Второе число (>= 0)

    Returns:
        ExtendedGCDResult(d, x, y) с d = gcd(a, b) = a*x + b*y

    Raises:
        ValueError: Если a или b отрицательные

    Examples:
        >>> gcd_ext(240, 46)
        ExtendedGCDResult(d=2, x=-9, y=47)
        >>> gcd_ext(7, 0)
        ExtendedGCDResult(d=7, x=1, y=0)
    """
    if a < 0 or b < 0:
        raise ValueError(f"gcd_ext expects non-negative operands, got a={a}, b={b}")

    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y

    return ExtendedGCDResult(d=old_r, x=old_x, y=old_y)


def inv_mod(a: int, modder: ModularArithmetic) -> Optional[int]:
    """
    Обратный элемент a по модулю M.

    Args:
        a: Элемент (любое целое, представимое в "двойном" типе)
        modder: Арифметика mod M (sentinel m == 0 → M = 2^W)

    Returns:
        inv ∈ [0, M) с (a * inv) mod M == mod(1), либо None если
        gcd(a, M) != 1

    Examples:
        >>> inv_mod(3, ModularArithmetic(7, 32))
        5
        >>> inv_mod(2, ModularArithmetic(0, 32)) is None
        True
    """
    a_reduced = modder.mod(a)
    d, x, _ = gcd_ext(a_reduced, modder.real_m)

    if d != 1:
        return None

    return modder.mod(x)
