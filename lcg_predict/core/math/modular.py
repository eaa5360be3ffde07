"""
Modular Arithmetic — арифметика mod M над беззнаковым доменом ширины W

Модуль обеспечивает все операции по модулю M для фиксированной разрядности:
- Каноническая редукция mod(x) для знаковых и беззнаковых значений
- Сумма, разность, произведение mod M
- Шаг LCG: (x*y + z) mod M
- Возведение в степень mod M через double_and_add

СОГЛАШЕНИЕ О МОДУЛЕ:
    Хранимое m ∈ [0, 2^W). Значение m == 0 — sentinel для M = 2^W
    (native wraparound). Любое ненулевое m обозначает само себя.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат любой операции ∈ [0, M)
2. Промежуточные значения помещаются в "двойной" тип U (width.py)
3. Sentinel m == 0 никогда не приводит к делению на ноль
4. Все операции детерминированы и не имеют side effects
"""

from dataclasses import dataclass

from lcg_predict.core.config import DEFAULT_WIDTH, validate_width
from lcg_predict.core.math.fast_combine import double_and_add
from lcg_predict.core.math.width import WideType, least_doubled_int, least_doubled_uint


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_modulus(m: int, width: int) -> None:
    """
    Валидация хранимого модуля: m ∈ [0, 2^width).

    Args:
        m: Хранимый модуль (0 = sentinel для 2^width)
        width: Разрядность домена

    Raises:
        ValueError: Если m не целое или вне диапазона
    """
    if isinstance(m, bool) or not isinstance(m, int):
        raise ValueError(f"m must be an int, got {m!r}")

    if not 0 <= m < (1 << width):
        raise ValueError(
            f"m must be in [0, 2^{width}) (0 denotes 2^{width}), got {m}"
        )


def true_modulus(m: int, width: int) -> int:
    """
    Истинный модуль M для хранимого значения m.

    Examples:
        >>> true_modulus(7, 32)
        7
        >>> true_modulus(0, 32)
        4294967296
    """
    return m if m != 0 else (1 << width)


# =============================================================================
# MODULAR ARITHMETIC
# =============================================================================


@dataclass(frozen=True)
class ModularArithmetic:
    """
    Арифметика по модулю M для беззнаковой разрядности width.

    Immutable (frozen=True). Два экземпляра равны, если равны хранимые
    модули и разрядности (sentinel m == 0 сравнивается как хранимое значение).
    """

    m: int
    width: int = DEFAULT_WIDTH

    def __post_init__(self) -> None:
        validate_width(self.width)
        validate_modulus(self.m, self.width)

    @property
    def real_m(self) -> int:
        """Истинный модуль M ∈ [1, 2^width]."""
        return true_modulus(self.m, self.width)

    @property
    def max_value(self) -> int:
        """Максимальное значение исходного W-битного типа."""
        return (1 << self.width) - 1

    @property
    def wide_uint(self) -> WideType:
        return least_doubled_uint(self.width)

    @property
    def wide_int(self) -> WideType:
        return least_doubled_int(self.width)

    # -------------------------------------------------------------------------
    # Редукция
    # -------------------------------------------------------------------------

    def mod(self, x: int) -> int:
        """
        Канонический вычет x в [0, M).

        x может быть знаковым; отрицательный остаток сдвигается на +M.

        Args:
            x: Целое, представимое в wide_uint или wide_int

        Returns:
            x mod M ∈ [0, M)

        Raises:
            ValueError: Если x не целое (float, bool и т.п.)
            OverflowError: Если x не представимо ни в одном "двойном" типе

        Examples:
            >>> ModularArithmetic(7, 32).mod(-1)
            6
            >>> ModularArithmetic(0, 32).mod(2**32)
            0
        """
        if isinstance(x, bool) or not isinstance(x, int):
            raise ValueError(f"value must be an int, got {x!r}")

        if not (self.wide_uint.contains(x) or self.wide_int.contains(x)):
            raise OverflowError(
                f"value {x} does not fit in the {self.wide_uint.bits}-bit "
                f"intermediate type for width {self.width}"
            )

        # Python % с положительным делителем уже даёт результат в [0, M)
        return x % self.real_m

    def __call__(self, x: int) -> int:
        return self.mod(x)

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def plus_mod(self, *args: int) -> int:
        """
        (x1 + x2 + ... + xk) mod M.

        Аргументы складываются попарно с редукцией после каждого сложения.
        """
        result = self.mod(0)
        for x in args:
            result = self.mod(result + x)
        return result

    def minus_mod(self, x: int, y: int) -> int:
        """(x - y) mod M."""
        return self.mod(x - y)

    def times_mod(self, *args: int) -> int:
        """
        (x1 * x2 * ... * xk) mod M.

        Правая свёртка: x1 * mod(x2 * mod(... * xk)), каждое произведение
        двух W-битных значений помещается в wide_uint.
        """
        result = self.mod(1)
        for x in reversed(args):
            result = self.mod(x * result)
        return result

    def times_plus_mod(self, x: int, y: int, z: int) -> int:
        """
        (x*y + z) mod M — формула шага LCG.

        Для x, y, z <= 2^W - 1: x*y + z <= 2^(2W) - 2^W < 2^(2W).
        """
        return self.mod(x * y + z)

    def times_plus_plus_mod(self, x: int, y: int, z: int, w: int) -> int:
        """
        (x*y + z + w) mod M.

        Для x, y, z, w <= 2^W - 1: x*y + z + w <= 2^(2W) - 1.
        """
        return self.mod(x * y + z + w)

    def pow_mod(self, base: int, exponent: int) -> int:
        """
        base^exponent mod M за O(log exponent) умножений.

        Args:
            base: Основание
            exponent: Показатель, целое в [0, 2^64)

        Returns:
            base^exponent mod M (mod(1) при exponent == 0)

        Examples:
            >>> ModularArithmetic(1000, 32).pow_mod(3, 5)
            243
        """
        return double_and_add(self.mod(base), exponent, self.times_mod, self.mod(1))
