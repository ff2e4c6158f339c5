"""
Numeral modules для daiji

Нормализация числовых строк и рендеринг даидзи.
"""

# Formatting
from daiji.core.numeral.formatting import format_numeric_value

# Normalizer
from daiji.core.numeral.normalizer import (
    NumeralNormalizer,
    normalize_numeral,
    shift_digits,
)

# Renderer
from daiji.core.numeral.renderer import (
    GROUP_SIZE,
    DaijiRenderer,
    group_index_of_leading_digit,
    position_of_leading_digit,
)

__all__ = [
    # Formatting
    "format_numeric_value",
    # Normalizer
    "NumeralNormalizer",
    "normalize_numeral",
    "shift_digits",
    # Renderer
    "GROUP_SIZE",
    "DaijiRenderer",
    "group_index_of_leading_digit",
    "position_of_leading_digit",
]
