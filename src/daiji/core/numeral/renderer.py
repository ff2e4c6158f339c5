"""
DaijiRenderer — Рендеринг целой части в строку даидзи

Целая часть разбивается на 4-значные группы справа налево; каждая группа
записывается как 千/百/拾/единицы, после непустой группы добавляется имя
группы (万, 億, 兆, ...).

    123456789 → "壱億弐千参百四拾五万六千七百八拾九"
    1000      → "壱千" (append_one_before_small_units=True) / "千" (False)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Дробная часть отбрасывается (усечение к нулю, без округления)
2. Нулевой результат: единственный глиф digit_glyphs[0], без знака
3. '壱' всегда пишется в разряде единиц группы, флаг влияет только на 千/百/拾
4. Группа из одних нулей не получает имени группы
5. Рендеринг не изменяет ни разложение, ни конфигурацию
"""

import logging
from typing import Final

from daiji.core.domain.config import DaijiConfig, OverflowPolicy
from daiji.core.domain.decomposition import NumeralDecomposition
from daiji.core.errors import LargeUnitOverflowError

logger = logging.getLogger(__name__)

# Размер группы и позиция разряда единиц внутри группы
GROUP_SIZE: Final[int] = 4
ONES_POSITION: Final[int] = GROUP_SIZE - 1

MINUS_SIGN: Final[str] = "-"


def group_index_of_leading_digit(digits: str) -> int:
    """Индекс large_unit_names для старшей группы."""
    return (len(digits) - 1) // GROUP_SIZE


def position_of_leading_digit(digits: str) -> int:
    """Позиция старшей цифры внутри группы: 0=千, 1=百, 2=拾, 3=единицы."""
    return (GROUP_SIZE - len(digits) % GROUP_SIZE) % GROUP_SIZE


class DaijiRenderer:
    """
    Рендерер даидзи, привязанный к конфигурации.

    Stateless относительно вызовов: все данные одного вызова локальны.
    """

    def __init__(self, config: DaijiConfig):
        self.config = config

    def render(self, decomposition: NumeralDecomposition) -> str:
        """
        Строка даидзи для целой части decomposition.

        Args:
            decomposition: Нормализованное число

        Returns:
            Строка даидзи, например "-壱万弐千参百四拾五"

        Raises:
            LargeUnitOverflowError: группа вне large_unit_names при OverflowPolicy.FAIL
        """
        config = self.config
        truncated = decomposition.without_fraction()

        if truncated.is_zero:
            return config.digit_glyphs[0]

        digits = truncated.integer_digits
        unit_count = len(config.large_unit_names)
        group_index = group_index_of_leading_digit(digits)
        position = position_of_leading_digit(digits)

        if group_index >= unit_count:
            if config.overflow_policy == OverflowPolicy.FAIL:
                raise LargeUnitOverflowError(
                    f"No large unit name for digit group {group_index} "
                    f"({len(digits)} digits, {unit_count} names configured)"
                )
            logger.warning(
                "Large unit names exhausted: %d digit group(s) rendered without unit name",
                group_index - unit_count + 1,
            )

        parts: list[str] = []
        if truncated.is_minus:
            parts.append(MINUS_SIGN)

        group_emitted = False
        for ch in digits:
            if ch != "0":
                digit = ord(ch) - ord("0")
                if (
                    position == ONES_POSITION
                    or digit != 1
                    or config.append_one_before_small_units
                ):
                    parts.append(config.digit_glyphs[digit])
                    group_emitted = True

                # 千 без цифры допустим: "千" для 1000
                unit = config.positional_unit_names[position]
                if unit:
                    parts.append(unit)
                    group_emitted = True

            if position == ONES_POSITION and group_emitted and group_index < unit_count:
                parts.append(config.large_unit_names[group_index])

            position = (position + 1) % GROUP_SIZE
            if position == 0:
                group_emitted = False
                group_index -= 1

        return "".join(parts)
