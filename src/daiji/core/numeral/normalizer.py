"""
NumeralNormalizer — Разбор числовой строки с экспонентой

Преобразует строку вида "31.4E-1" в NumeralDecomposition без экспоненты (3.14).

Грамматика входа:
    [+-] цифры[,] [. цифры] [E|e [+-] цифры]
Запятые и пробелы удаляются до разбора.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Экспонента применяется лексически: цифры переносятся между целой и
   дробной частью по одной, при исчерпании стороны подставляется '0'
2. Никакой арифметики: экспонента любой величины не вызывает переполнения
3. Ноль ("0", "-0", "0.0E5") возвращается без применения экспоненты
"""

import logging
import re
from collections import deque
from typing import Final

from daiji.core.domain.decomposition import NumeralDecomposition
from daiji.core.errors import MalformedNumeralError

logger = logging.getLogger(__name__)

# =============================================================================
# ГРАММАТИКА
# =============================================================================

EXPONENT_MARKER: Final[str] = "E"
DECIMAL_POINT: Final[str] = "."
SIGN_CHARACTERS: Final[str] = "+-"
REMOVED_CHARACTERS: Final[tuple[str, ...]] = (",", " ")

_DIGITS_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]*")
_EXPONENT_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# NORMALIZER
# =============================================================================


class NumeralNormalizer:
    """
    Нормализатор числовых строк (stateless).

    Порядок разбора:
    1. Удаление запятых/пробелов, trim, upper
    2. Знак
    3. Мантисса / экспонента
    4. Целая / дробная часть мантиссы
    5. Удаление ведущих и хвостовых нулей, проверка на ноль
    6. Сдвиг цифр на величину экспоненты
    """

    def normalize(self, text: str) -> NumeralDecomposition:
        """
        Нормализация числовой строки.

        Args:
            text: Числовая строка, например "-1,234.5e3"

        Returns:
            NumeralDecomposition без экспоненты

        Raises:
            MalformedNumeralError: пустая строка, посторонний символ,
                некорректная экспонента

        Examples:
            >>> str(NumeralNormalizer().normalize("31.4E-1"))
            '3.14'
            >>> str(NumeralNormalizer().normalize("-1,200"))
            '-1200'
        """
        cleaned = text
        for ch in REMOVED_CHARACTERS:
            cleaned = cleaned.replace(ch, "")
        cleaned = cleaned.strip().upper()
        if not cleaned:
            raise MalformedNumeralError(f"No numeral characters found in {text!r}")

        # 1. Знак
        is_minus = cleaned[0] == "-"
        cleaned = cleaned.lstrip(SIGN_CHARACTERS)

        # 2. Мантисса и экспонента
        mantissa, exponent = self._split_exponent(cleaned, text)

        # 3. Целая и дробная часть
        integer_part, fraction_part = self._split_mantissa(mantissa, text)

        integer_part = integer_part.lstrip("0")
        fraction_part = fraction_part.rstrip("0")

        # Ноль: экспонента не применяется
        if not integer_part and not fraction_part:
            logger.debug("Normalized %r to zero", text)
            return NumeralDecomposition.zero()

        # 4. Лексический сдвиг
        integer_part, fraction_part = shift_digits(integer_part, fraction_part, exponent)

        result = NumeralDecomposition(
            is_minus=is_minus,
            integer_digits=integer_part,
            fraction_digits=fraction_part,
        )
        logger.debug("Normalized %r to %s", text, result)
        return result

    @staticmethod
    def _split_exponent(value: str, source: str) -> tuple[str, int]:
        fields = value.split(EXPONENT_MARKER)
        if len(fields) == 1:
            return fields[0], 0
        if len(fields) > 2:
            raise MalformedNumeralError(f"More than one exponent marker in {source!r}")

        mantissa, exponent_text = fields
        if not _EXPONENT_RE.fullmatch(exponent_text):
            raise MalformedNumeralError(
                f"Exponent {exponent_text!r} is not a signed integer in {source!r}"
            )
        try:
            exponent = int(exponent_text)
        except ValueError as e:
            # int() ограничивает длину строки (sys.get_int_max_str_digits)
            raise MalformedNumeralError(
                f"Exponent of {len(exponent_text)} characters is too long in numeral"
            ) from e
        return mantissa, exponent

    @staticmethod
    def _split_mantissa(mantissa: str, source: str) -> tuple[str, str]:
        fields = mantissa.split(DECIMAL_POINT)
        if len(fields) > 2:
            raise MalformedNumeralError(f"More than one decimal point in {source!r}")

        integer_part = fields[0]
        fraction_part = fields[1] if len(fields) == 2 else ""

        for part in (integer_part, fraction_part):
            if not _DIGITS_RE.fullmatch(part):
                raise MalformedNumeralError(f"Unexpected character in numeral {source!r}")
        if not integer_part and not fraction_part:
            raise MalformedNumeralError(f"Mantissa has no digits in {source!r}")

        return integer_part, fraction_part


# =============================================================================
# DIGIT SHIFT
# =============================================================================


def shift_digits(integer_part: str, fraction_part: str, exponent: int) -> tuple[str, str]:
    """
    Перенос десятичной точки на exponent позиций (по одной цифре).

    exponent > 0: первая цифра дробной части (или '0') дописывается в конец целой.
    exponent < 0: последняя цифра целой части (или '0') переносится в начало дробной.

    Returns:
        (integer_part, fraction_part) без ведущих / хвостовых нулей

    Examples:
        >>> shift_digits("120", "3045", 4)
        ('1203045', '')
        >>> shift_digits("31", "4", -3)
        ('', '0314')
    """
    integer = list(integer_part)
    fraction = deque(fraction_part)

    while exponent > 0:
        integer.append(fraction.popleft() if fraction else "0")
        exponent -= 1

    while exponent < 0:
        fraction.appendleft(integer.pop() if integer else "0")
        exponent += 1

    return "".join(integer).lstrip("0"), "".join(fraction).rstrip("0")


def normalize_numeral(text: str) -> NumeralDecomposition:
    """
    Нормализация числовой строки (convenience).

    Raises:
        MalformedNumeralError: Если строка некорректна
    """
    return NumeralNormalizer().normalize(text)
