"""
Core configuration — константы численного домена

Единственное место, где задаются:
- поддерживаемые разрядности беззнаковых целых (W)
- native разрядности, из которых выбирается двойной тип
- seed по умолчанию
- граница числа шагов (беззнаковое 64-битное значение)
"""

from typing import Final

# =============================================================================
# РАЗРЯДНОСТИ
# =============================================================================

# Разрядности беззнакового домена, над которыми строится арифметика mod M
SUPPORTED_WIDTHS: Final[tuple[int, ...]] = (32, 64, 128)

# Native разрядности, из которых выбирается "двойной" тип для промежуточных
# вычислений. Если ни одна не подходит → arbitrary precision.
NATIVE_UINT_WIDTHS: Final[tuple[int, ...]] = (32, 64, 128)

# Разрядность по умолчанию (uint64)
DEFAULT_WIDTH: Final[int] = 64


# =============================================================================
# ДВИЖОК
# =============================================================================

# Начальное состояние генератора по умолчанию
DEFAULT_SEED: Final[int] = 1

# Число шагов — беззнаковое 64-битное значение: n ∈ [0, 2^64)
STEP_COUNT_BITS: Final[int] = 64
MAX_STEP_COUNT: Final[int] = (1 << STEP_COUNT_BITS) - 1


def validate_width(width: int) -> None:
    """
    Проверка, что разрядность поддерживается.

    Args:
        width: Разрядность беззнакового домена (бит)

    Raises:
        ValueError: Если width не входит в SUPPORTED_WIDTHS
    """
    if isinstance(width, bool) or not isinstance(width, int):
        raise ValueError(f"width must be an int, got {width!r}")

    if width not in SUPPORTED_WIDTHS:
        raise ValueError(f"width must be one of {SUPPORTED_WIDTHS}, got {width}")


def validate_step_count(n: int, name: str = "n") -> None:
    """
    Проверка числа шагов: целое в [0, MAX_STEP_COUNT].

    Args:
        n: Число шагов
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если n не целое, отрицательное или не помещается в 64 бита
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise ValueError(f"{name} must be an int, got {n!r}")

    if n < 0:
        raise ValueError(f"{name} must be non-negative, got {n}")

    if n > MAX_STEP_COUNT:
        raise ValueError(f"{name} must fit in {STEP_COUNT_BITS} bits (<= {MAX_STEP_COUNT}), got {n}")
