"""
NumeralDecomposition — Каноническое представление числа без экспоненты

Immutable Pydantic модель: знак + цифры целой части + цифры дробной части.
Создаётся нормализатором один раз на вызов конвертации, при рендеринге
заменяется новой моделью без дробной части, затем отбрасывается.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. integer_digits и fraction_digits содержат только символы '0'-'9'
2. integer_digits не имеет ведущих нулей, fraction_digits не имеет хвостовых
3. is_zero ⇔ обе строки цифр пусты; при is_zero всегда is_minus=False
4. Усечения (without_fraction / without_integer) возвращают новую модель,
   исходная никогда не мутирует
"""

import logging
from typing import Any, Final

from pydantic import BaseModel, Field, computed_field, model_validator

logger = logging.getLogger(__name__)

# Только ASCII-цифры: полноширинные '０'-'９' не допускаются
DIGITS_PATTERN: Final[str] = r"^[0-9]*$"


class NumeralDecomposition(BaseModel):
    """
    Число в виде знака, целой и дробной частей (строки цифр).

    Examples:
        >>> d = NumeralDecomposition(is_minus=True, integer_digits="0012", fraction_digits="500")
        >>> str(d)
        '-12.5'
        >>> d.without_fraction().integer_digits
        '12'
    """

    is_minus: bool = Field(False, description="Отрицательное ненулевое значение")
    integer_digits: str = Field(
        "", pattern=DIGITS_PATTERN, description="Целая часть без ведущих нулей"
    )
    fraction_digits: str = Field(
        "", pattern=DIGITS_PATTERN, description="Дробная часть без хвостовых нулей"
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def strip_redundant_zeros(cls, data: Any) -> Any:
        """Удаление ведущих/хвостовых нулей и сброс знака у нуля."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        integer = data.get("integer_digits", "")
        fraction = data.get("fraction_digits", "")

        if isinstance(integer, str):
            integer = integer.lstrip("0")
            data["integer_digits"] = integer
        if isinstance(fraction, str):
            fraction = fraction.rstrip("0")
            data["fraction_digits"] = fraction

        if integer == "" and fraction == "":
            data["is_minus"] = False

        return data

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @computed_field
    @property
    def is_zero(self) -> bool:
        """Значение равно нулю (нет ни целой, ни дробной части)."""
        return not (self.integer_digits or self.fraction_digits)

    @property
    def has_integer(self) -> bool:
        return len(self.integer_digits) > 0

    @property
    def has_fraction(self) -> bool:
        return len(self.fraction_digits) > 0

    # -------------------------------------------------------------------------
    # Конструкторы и усечения
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "NumeralDecomposition":
        """Нулевое разложение."""
        return cls()

    def without_fraction(self) -> "NumeralDecomposition":
        """
        Копия без дробной части.

        Усечение может дать ноль ("-0.9" → 0), тогда знак сбрасывается.
        """
        return NumeralDecomposition(
            is_minus=self.is_minus,
            integer_digits=self.integer_digits,
        )

    def without_integer(self) -> "NumeralDecomposition":
        """
        Копия без целой части.

        Усечение может дать ноль ("12" → 0), тогда знак сбрасывается.
        """
        return NumeralDecomposition(
            is_minus=self.is_minus,
            fraction_digits=self.fraction_digits,
        )

    # -------------------------------------------------------------------------
    # Строковое представление
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        """
        Строка вида [-]целая[.дробная].

        Examples: "0", "1", "0.1", "-1.2"
        """
        if self.is_zero:
            return "0"

        sign = "-" if self.is_minus else ""
        integer = self.integer_digits or "0"
        if self.fraction_digits:
            return f"{sign}{integer}.{self.fraction_digits}"
        return f"{sign}{integer}"

    def dump(self) -> None:
        """Отладочный вывод в лог (DEBUG)."""
        logger.debug("NumeralDecomposition: %s", "ZERO" if self.is_zero else str(self))
