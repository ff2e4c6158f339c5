"""
Numeric Formatting — числовое значение → числовая строка без потери точности

Закрытый набор поддерживаемых типов (functools.singledispatch):
- int      → str(value)
- float    → точное десятичное разложение через Decimal(value)
- Decimal  → str(value) (может содержать экспоненту "1E+5")

Для float и Decimal всегда выдаются все значащие цифры (не менее 35, если они
есть у значения), округление никогда не выполняется: нормализатор отбросит
дробную часть сам.
"""

import math
from decimal import Decimal
from functools import singledispatch

from daiji.core.errors import MalformedNumeralError


@singledispatch
def format_numeric_value(value: object) -> str:
    """
    Числовая строка для value.

    Raises:
        TypeError: тип не поддерживается
        MalformedNumeralError: NaN или бесконечность

    Examples:
        >>> format_numeric_value(12345)
        '12345'
        >>> format_numeric_value(0.5)
        '0.5'
        >>> format_numeric_value(Decimal("1.20E+3"))
        '1.20E+3'
    """
    raise TypeError(f"Unsupported numeric type: {type(value).__name__}")


@format_numeric_value.register
def _format_bool(value: bool) -> str:
    raise TypeError("bool is not a numeric value for daiji conversion")


@format_numeric_value.register
def _format_int(value: int) -> str:
    return str(value)


@format_numeric_value.register
def _format_float(value: float) -> str:
    if not math.isfinite(value):
        raise MalformedNumeralError(f"Value is not finite: {value}")
    # Decimal(float): точное двоичное значение, без округления
    return str(Decimal(value))


@format_numeric_value.register
def _format_decimal(value: Decimal) -> str:
    if not value.is_finite():
        raise MalformedNumeralError(f"Value is not finite: {value}")
    return str(value)
