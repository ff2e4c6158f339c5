"""
daiji — конвертация чисел в японские даидзи (大字).

    >>> from daiji import convert_number
    >>> convert_number(12345)
    '壱万弐千参百四拾五'
"""

from daiji.converter import DaijiConverter, convert_number, convert_numeral_string
from daiji.core.domain import DaijiConfig, NumeralDecomposition, OverflowPolicy
from daiji.core.errors import (
    ConfigurationError,
    DaijiError,
    LargeUnitOverflowError,
    MalformedNumeralError,
)

__version__ = "1.0.0"

__all__ = [
    # Converter
    "DaijiConverter",
    "convert_number",
    "convert_numeral_string",
    # Models
    "DaijiConfig",
    "NumeralDecomposition",
    "OverflowPolicy",
    # Errors
    "DaijiError",
    "MalformedNumeralError",
    "ConfigurationError",
    "LargeUnitOverflowError",
]
