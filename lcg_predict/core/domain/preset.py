"""
LCGPreset — именованная конфигурация известного генератора

Immutable Pydantic модель. Чистые данные: параметры (a, c, m, width)
и опубликованная таблица первых выходов после seed = 1, используемая
как тестовый оракул.
Соответствует схеме core/contracts/schema/lcg_preset.json.
"""

from pydantic import BaseModel, Field, model_validator

from lcg_predict.core.config import DEFAULT_WIDTH, SUPPORTED_WIDTHS
from lcg_predict.core.math.modular import true_modulus


class LCGPreset(BaseModel):
    """
    Параметры генератора x' = (a*x + c) mod M.

    Immutable модель (frozen=True).
    """

    name: str = Field(..., pattern="^[a-z][a-z0-9_]*$", description="Идентификатор пресета")
    description: str = Field("", description="Источник / назначение генератора")

    a: int = Field(..., ge=0, description="Множитель")
    c: int = Field(..., ge=0, description="Приращение")
    m: int = Field(..., ge=0, description="Хранимый модуль (0 = 2^width)")
    width: int = Field(DEFAULT_WIDTH, description="Разрядность беззнакового домена")

    reference_outputs: tuple[int, ...] = Field(
        default=(), description="Опубликованные выходы шагов 1..k при seed = 1"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_domain(self) -> "LCGPreset":
        """
        Проверка согласованности width, m и таблицы выходов.
        """
        if self.width not in SUPPORTED_WIDTHS:
            raise ValueError(f"width must be one of {SUPPORTED_WIDTHS}, got {self.width}")

        if self.m >= (1 << self.width):
            raise ValueError(f"m={self.m} does not fit in {self.width} bits")

        real_m = true_modulus(self.m, self.width)
        for value in self.reference_outputs:
            if not 0 <= value < real_m:
                raise ValueError(
                    f"reference output {value} of preset '{self.name}' is outside [0, {real_m})"
                )
        return self
