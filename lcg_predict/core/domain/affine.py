"""
AffineTransform — один шаг LCG как аффинное отображение

    f(x) = (a*x + c) mod M

Immutable Pydantic модель. Коэффициенты a, c нормализуются по модулю M
при создании, поэтому любой экземпляр хранит канонические вычеты.

Алгебра:
- compose(f, g) = f∘g:  h.a = f.a*g.a,  h.c = f.a*g.c + f.c  (mod M)
- identity():          a = 1, c = 0 (нейтральный элемент композиции)
- powered(n):          f∘f∘...∘f (n раз) за O(log n) композиций
- f + g, f - g:        покоэффициентные сумма/разность
- inverse():           f^-1 или None, если a необратим mod M

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. a, c ∈ [0, M) для любого экземпляра
2. Модуль экземпляра неизменяем: смена модуля создаёт новый экземпляр
   с пересчитанными коэффициентами (with_modulus)
3. Комбинировать можно только преобразования с одинаковым модулем
   (ModulusMismatchError)
"""

from typing import TYPE_CHECKING, Any, Optional

from pydantic import BaseModel, Field, model_validator

from lcg_predict.core.config import DEFAULT_WIDTH, validate_width
from lcg_predict.core.math.fast_combine import double_and_add
from lcg_predict.core.math.modular import ModularArithmetic
from lcg_predict.core.math.number_theory import inv_mod

if TYPE_CHECKING:
    from lcg_predict.core.domain.preset import LCGPreset


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ModulusMismatchError(ValueError):
    """
    Попытка комбинировать преобразования с разными модулями.

    Нарушение контракта вызывающей стороны (programmer error), а не
    восстанавливаемая ошибка времени выполнения.
    """

    pass


# =============================================================================
# AFFINE TRANSFORM MODEL
# =============================================================================


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class AffineTransform(BaseModel):
    """
    Аффинное преобразование x -> (a*x + c) mod M.

    Immutable модель (frozen=True). Равенство структурное по (a, c, m, width).

    Examples:
        >>> f = AffineTransform(1103515245, 12345, 2**31, width=32)
        >>> f(1)
        1103527590
    """

    a: int = Field(..., ge=0, description="Множитель, вычет mod M")
    c: int = Field(..., ge=0, description="Приращение, вычет mod M")
    m: int = Field(0, ge=0, description="Хранимый модуль (0 = 2^width)")
    width: int = Field(DEFAULT_WIDTH, description="Разрядность беззнакового домена")

    model_config = {"frozen": True, "strict": True}

    def __init__(self, a: int, c: int, m: int = 0, width: int = DEFAULT_WIDTH) -> None:
        super().__init__(a=a, c=c, m=m, width=width)

    @model_validator(mode="before")
    @classmethod
    def normalize_coefficients(cls, data: Any) -> Any:
        """
        Приведение a, c к каноническим вычетам mod M.

        Некорректные width/m отклоняются до нормализации.
        """
        if not isinstance(data, dict):
            return data

        width = data.get("width", DEFAULT_WIDTH)
        m = data.get("m", 0)
        if not (_is_plain_int(width) and _is_plain_int(m)):
            # Ошибку типа сформирует strict-валидация полей
            return data

        validate_width(width)
        modder = ModularArithmetic(m, width)

        normalized = dict(data)
        for name in ("a", "c"):
            value = data.get(name)
            if _is_plain_int(value):
                try:
                    normalized[name] = modder.mod(value)
                except OverflowError as e:
                    # ValueError → pydantic ValidationError, как и прочие ошибки ввода
                    raise ValueError(f"{name}: {e}") from e
        return normalized

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def modder(self) -> ModularArithmetic:
        """Арифметика mod M этого преобразования."""
        return ModularArithmetic(self.m, self.width)

    @property
    def real_m(self) -> int:
        """Истинный модуль M."""
        return self.modder.real_m

    def min(self) -> int:
        """
        Нижняя граница выходных значений.

        При c == 0 и ненулевом seed значение 0 недостижимо → 1.
        """
        return 1 if self.c == 0 else 0

    def max(self) -> int:
        """Верхняя граница выходных значений: M - 1."""
        return self.real_m - 1

    # -------------------------------------------------------------------------
    # Применение
    # -------------------------------------------------------------------------

    def __call__(self, x: int) -> int:
        """Один шаг: (a*x + c) mod M."""
        return self.modder.times_plus_mod(self.a, x, self.c)

    # -------------------------------------------------------------------------
    # Алгебра
    # -------------------------------------------------------------------------

    def _require_same_modulus(self, other: "AffineTransform") -> ModularArithmetic:
        modder = self.modder
        if modder != other.modder:
            raise ModulusMismatchError(
                f"Cannot combine transforms with different moduli: "
                f"m={self.m} (width {self.width}) vs m={other.m} (width {other.width})"
            )
        return modder

    def __add__(self, other: object) -> "AffineTransform":
        if not isinstance(other, AffineTransform):
            return NotImplemented
        modder = self._require_same_modulus(other)
        return AffineTransform(
            modder.plus_mod(self.a, other.a),
            modder.plus_mod(self.c, other.c),
            self.m,
            self.width,
        )

    def __sub__(self, other: object) -> "AffineTransform":
        if not isinstance(other, AffineTransform):
            return NotImplemented
        modder = self._require_same_modulus(other)
        return AffineTransform(
            modder.minus_mod(self.a, other.a),
            modder.minus_mod(self.c, other.c),
            self.m,
            self.width,
        )

    def compose(self, inner: "AffineTransform") -> "AffineTransform":
        """
        Композиция self∘inner: h(x) = self(inner(x)).

        Args:
            inner: Преобразование, применяемое первым

        Returns:
            h с h.a = self.a*inner.a, h.c = self.a*inner.c + self.c (mod M)

        Raises:
            ModulusMismatchError: Если модули различаются
        """
        modder = self._require_same_modulus(inner)
        return AffineTransform(
            modder.times_mod(self.a, inner.a),
            modder.times_plus_mod(self.a, inner.c, self.c),
            self.m,
            self.width,
        )

    def identity(self) -> "AffineTransform":
        """Тождественное преобразование (a=1, c=0) с тем же модулем."""
        return AffineTransform(1, 0, self.m, self.width)

    def powered(self, n: int) -> "AffineTransform":
        """
        n-кратная композиция self с собой за O(log n) композиций.

        Args:
            n: Число шагов, целое в [0, 2^64)

        Returns:
            f^n; identity() при n == 0

        Raises:
            ValueError: Если n отрицательное или не помещается в 64 бита
        """
        return double_and_add(self, n, compose, self.identity())

    def inverse(self) -> Optional["AffineTransform"]:
        """
        Обратное преобразование f^-1(x) = a^-1*x - a^-1*c (mod M).

        Returns:
            f^-1, либо None если gcd(a, M) != 1
        """
        modder = self.modder
        a_inv = inv_mod(self.a, modder)
        if a_inv is None:
            return None

        c_inv = modder.minus_mod(0, modder.times_mod(a_inv, self.c))
        return AffineTransform(a_inv, c_inv, self.m, self.width)

    # -------------------------------------------------------------------------
    # Производные экземпляры
    # -------------------------------------------------------------------------

    def with_a(self, a: int) -> "AffineTransform":
        return AffineTransform(a, self.c, self.m, self.width)

    def with_c(self, c: int) -> "AffineTransform":
        return AffineTransform(self.a, c, self.m, self.width)

    def with_modulus(self, m: int) -> "AffineTransform":
        """
        Новое преобразование с модулем m.

        Хранимые a, c заново приводятся по новому модулю.
        """
        return AffineTransform(self.a, self.c, m, self.width)

    @classmethod
    def from_preset(cls, preset: "LCGPreset") -> "AffineTransform":
        """Преобразование из именованной конфигурации генератора."""
        return cls(preset.a, preset.c, preset.m, preset.width)


def compose(outer: AffineTransform, inner: AffineTransform) -> AffineTransform:
    """Композиция outer∘inner: h(x) = outer(inner(x))."""
    return outer.compose(inner)
