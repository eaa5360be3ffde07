"""
Core mathematical primitives and domain models.

Modular arithmetic, the fast-combine combinator, the affine-transform
algebra and the LCG engine. Independent of presets and external formats.
"""
