"""
Interop — адаптеры внешних представлений состояния генераторов.
"""

from .reference_state import (
    ReferenceStateError,
    engine_from_reference_state,
    format_state_token,
    parse_state_token,
)

__all__ = [
    "ReferenceStateError",
    "engine_from_reference_state",
    "format_state_token",
    "parse_state_token",
]
