"""LCG Engine — генератор с последовательным шагом и skip-ahead за O(log n).

Движок владеет одним AffineTransform (правило обновления) и текущим
состоянием:
- step() / next(engine): state = f(state), возвращает новое состояние
- value_after_n_steps(n): f^n(state) без изменения состояния, O(log n)
- discard(n): state = f^n(state)
- value_before_n_steps(n): f^-n(state) или None, если f необратимо

Инвариант: state ∈ [0, M) в любой момент наблюдения.
"""

from typing import TYPE_CHECKING, Any, Dict, Optional

from lcg_predict.core.config import DEFAULT_SEED, DEFAULT_WIDTH
from lcg_predict.core.contracts import validate_engine_snapshot
from lcg_predict.core.domain.affine import AffineTransform

if TYPE_CHECKING:
    from lcg_predict.core.domain.preset import LCGPreset


class LCGEngine:
    """Линейный конгруэнтный генератор x' = (a*x + c) mod M.

    Последовательность выходов бесконечна: движок реализует iterator
    protocol, `next(engine)` эквивалентен `engine.step()`.

    Examples:
        >>> engine = LCGEngine.from_parameters(48271, 0, 2147483647, width=32)
        >>> engine.value_after_n_steps(10000)
        399268537
    """

    default_seed = DEFAULT_SEED

    def __init__(self, affine: AffineTransform, state: int = DEFAULT_SEED):
        """
        Args:
            affine: правило обновления
            state: начальное состояние (seed), приводится mod M
        """
        self._affine = affine
        self._state = affine.modder.mod(state)

    @classmethod
    def from_parameters(
        cls,
        a: int,
        c: int,
        m: int = 0,
        state: int = DEFAULT_SEED,
        width: int = DEFAULT_WIDTH
    ) -> "LCGEngine":
        """Движок из коэффициентов (m == 0 → M = 2^width)."""
        return cls(AffineTransform(a, c, m, width), state)

    @classmethod
    def from_preset(cls, preset: "LCGPreset", state: int = DEFAULT_SEED) -> "LCGEngine":
        """Движок из именованной конфигурации генератора."""
        return cls(AffineTransform.from_preset(preset), state)

    # -------------------------------------------------------------------------
    # Переходы состояния
    # -------------------------------------------------------------------------

    def step(self) -> int:
        """Один шаг генератора. Возвращает новое состояние."""
        self._state = self._affine(self._state)
        return self._state

    def __call__(self) -> int:
        return self.step()

    def __iter__(self) -> "LCGEngine":
        return self

    def __next__(self) -> int:
        return self.step()

    def value_after_n_steps(self, n: int) -> int:
        """Состояние после n шагов, без изменения движка.

        O(log n) композиций вместо n последовательных шагов.

        Args:
            n: число шагов, целое в [0, 2^64)

        Returns:
            f^n(state)
        """
        return self._affine.powered(n)(self._state)

    def discard(self, n: int) -> None:
        """Пропуск n шагов: state = f^n(state)."""
        self._state = self.value_after_n_steps(n)

    def value_before_n_steps(self, n: int) -> Optional[int]:
        """Состояние n шагов назад, без изменения движка.

        Returns:
            f^-n(state), либо None если a необратим mod M
        """
        inverse = self._affine.inverse()
        if inverse is None:
            return None
        return inverse.powered(n)(self._state)

    # -------------------------------------------------------------------------
    # Параметры и состояние
    # -------------------------------------------------------------------------

    @property
    def affine(self) -> AffineTransform:
        return self._affine

    @affine.setter
    def affine(self, new_affine: AffineTransform) -> None:
        self._affine = new_affine
        self._state = new_affine.modder.mod(self._state)

    @property
    def a(self) -> int:
        return self._affine.a

    @a.setter
    def a(self, new_a: int) -> None:
        self._affine = self._affine.with_a(new_a)

    @property
    def c(self) -> int:
        return self._affine.c

    @c.setter
    def c(self, new_c: int) -> None:
        self._affine = self._affine.with_c(new_c)

    @property
    def m(self) -> int:
        return self._affine.m

    @m.setter
    def m(self, new_m: int) -> None:
        # Коэффициенты и состояние пересчитываются по новому модулю
        self.affine = self._affine.with_modulus(new_m)

    @property
    def width(self) -> int:
        return self._affine.width

    @property
    def state(self) -> int:
        return self._state

    @state.setter
    def state(self, new_state: int) -> None:
        self._state = self._affine.modder.mod(new_state)

    def min(self) -> int:
        return self._affine.min()

    def max(self) -> int:
        return self._affine.max()

    # -------------------------------------------------------------------------
    # Сериализация
    # -------------------------------------------------------------------------

    def snapshot(self) -> Dict[str, Any]:
        """Снапшот движка (контракт engine_snapshot)."""
        return {
            "a": self._affine.a,
            "c": self._affine.c,
            "m": self._affine.m,
            "width": self._affine.width,
            "state": self._state,
        }

    @classmethod
    def from_snapshot(cls, data: Dict[str, Any]) -> "LCGEngine":
        """Восстановление движка из снапшота.

        Raises:
            ValidationError: если данные не соответствуют engine_snapshot
        """
        validate_engine_snapshot(data)
        return cls.from_parameters(
            a=data["a"],
            c=data["c"],
            m=data["m"],
            state=data["state"],
            width=data["width"]
        )

    def copy(self) -> "LCGEngine":
        """Независимая копия движка."""
        return LCGEngine(self._affine, self._state)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LCGEngine):
            return NotImplemented
        return self._affine == other._affine and self._state == other._state

    def __repr__(self) -> str:
        return (
            f"LCGEngine(a={self.a}, c={self.c}, m={self.m}, "
            f"width={self.width}, state={self._state})"
        )
