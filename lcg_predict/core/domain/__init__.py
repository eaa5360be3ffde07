"""
Domain models and value objects.

Contains the affine transform, the LCG engine and generator presets.
"""

from lcg_predict.core.domain.affine import (
    AffineTransform,
    ModulusMismatchError,
    compose,
)
from lcg_predict.core.domain.engine import LCGEngine
from lcg_predict.core.domain.preset import LCGPreset

__all__ = [
    # Affine transform
    "AffineTransform",
    "ModulusMismatchError",
    "compose",
    # Engine
    "LCGEngine",
    # Preset model
    "LCGPreset",
]
