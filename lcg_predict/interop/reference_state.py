"""
Reference State Adapter — текстовое состояние эталонного генератора

Эталонные LCG (например, std::linear_congruential_engine) сериализуют
состояние как ASCII десятичные цифры внутреннего значения. Адаптер
разбирает такой токен и создаёт LCGEngine для кросс-валидации.

Адаптер не входит в алгебраическое ядро: он только переводит внешний
токен во внутреннее числовое состояние.
"""

import logging
import re
from typing import Union

from lcg_predict.core.config import DEFAULT_WIDTH, validate_width
from lcg_predict.core.domain.affine import AffineTransform
from lcg_predict.core.domain.engine import LCGEngine
from lcg_predict.core.domain.preset import LCGPreset

logger = logging.getLogger(__name__)

_DECIMAL_TOKEN = re.compile(r"[0-9]+")


class ReferenceStateError(ValueError):
    """Текстовое состояние эталонного генератора не распознано."""

    pass


def parse_state_token(text: str, width: int = DEFAULT_WIDTH) -> int:
    """
    Разбор десятичного токена состояния.

    Допускаются пробельные символы вокруг токена.

    Args:
        text: Текстовое представление состояния (например, "48271")
        width: Разрядность беззнакового домена

    Returns:
        Значение состояния ∈ [0, 2^width)

    Raises:
        ReferenceStateError: Если токен пустой, содержит не-цифры
            или не помещается в width бит

    Examples:
        >>> parse_state_token(" 182605794\\n", 32)
        182605794
    """
    validate_width(width)

    token = text.strip()
    if not _DECIMAL_TOKEN.fullmatch(token):
        raise ReferenceStateError(f"State token must be ASCII decimal digits, got {text!r}")

    value = int(token)
    if value >= (1 << width):
        raise ReferenceStateError(f"State {value} does not fit in {width} bits")

    return value


def format_state_token(engine: LCGEngine) -> str:
    """Текстовое представление состояния движка (десятичные цифры)."""
    return str(engine.state)


def engine_from_reference_state(
    source: Union[AffineTransform, LCGPreset],
    text: str,
) -> LCGEngine:
    """
    Движок с параметрами source и состоянием из текстового токена.

    Args:
        source: Правило обновления или пресет эталонного генератора
        text: Текстовое состояние эталонного генератора

    Returns:
        LCGEngine, готовый к сравнению с эталоном

    Raises:
        ReferenceStateError: Если токен не распознан
    """
    if isinstance(source, LCGPreset):
        affine = AffineTransform.from_preset(source)
    else:
        affine = source

    state = parse_state_token(text, affine.width)
    engine = LCGEngine(affine, state)

    logger.debug(
        "Bootstrapped engine a=%d c=%d m=%d from reference state %d",
        affine.a,
        affine.c,
        affine.m,
        state,
    )
    return engine
