"""
Domain models and value objects.

Contains the numeral decomposition value object and the rendering configuration.
"""

from daiji.core.domain.config import (
    DEFAULT_DIGIT_GLYPHS,
    DEFAULT_LARGE_UNIT_NAMES,
    DEFAULT_POSITIONAL_UNIT_NAMES,
    DIGIT_GLYPH_COUNT,
    POSITIONAL_UNIT_COUNT,
    DaijiConfig,
    OverflowPolicy,
)
from daiji.core.domain.decomposition import NumeralDecomposition

__all__ = [
    # Config
    "DEFAULT_DIGIT_GLYPHS",
    "DEFAULT_LARGE_UNIT_NAMES",
    "DEFAULT_POSITIONAL_UNIT_NAMES",
    "DIGIT_GLYPH_COUNT",
    "POSITIONAL_UNIT_COUNT",
    "DaijiConfig",
    "OverflowPolicy",
    # Decomposition
    "NumeralDecomposition",
]
