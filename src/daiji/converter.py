"""
DaijiConverter — Публичный фасад конвертации в даидзи

Конвейер: значение → числовая строка → NumeralDecomposition → строка даидзи.

    >>> converter = DaijiConverter()
    >>> converter.convert_number(123456789)
    '壱億弐千参百四拾五万六千七百八拾九'
    >>> converter.convert_numeral_string("120.3045E4")
    '壱百弐拾万参千四拾五'

Замечания:
- Дробная часть отбрасывается, поэтому "0.9" даёт "零"
- Для отрицательных чисел в начало добавляется '-'
- Конфигурация считается неизменяемой во время вызова; сеттеры заменяют
  объект конфигурации целиком (без блокировок)
"""

import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Mapping, Sequence, Union

from daiji.core.contracts import load_config_file
from daiji.core.domain import DaijiConfig, NumeralDecomposition, OverflowPolicy
from daiji.core.errors import ConfigurationError
from daiji.core.numeral import DaijiRenderer, NumeralNormalizer, format_numeric_value

logger = logging.getLogger(__name__)

NumericValue = Union[int, float, Decimal]


class DaijiConverter:
    """
    Конвертер чисел в даидзи.

    Порядок вызова:
    1. convert_number: форматирование значения без потери точности
    2. convert_numeral_string: NumeralNormalizer → DaijiRenderer
    """

    def __init__(self, config: DaijiConfig | None = None):
        self._normalizer = NumeralNormalizer()
        self._renderer = DaijiRenderer(config if config is not None else DaijiConfig())

    @classmethod
    def from_config_file(cls, path: Union[str, Path]) -> "DaijiConverter":
        """
        Конвертер с конфигурацией из JSON файла.

        Raises:
            ConfigurationError: Если файл нарушает схему daiji_config
        """
        return cls(load_config_file(path))

    # -------------------------------------------------------------------------
    # Конфигурация
    # -------------------------------------------------------------------------

    @property
    def config(self) -> DaijiConfig:
        return self._renderer.config

    @config.setter
    def config(self, value: Union[DaijiConfig, Mapping[str, Any]]) -> None:
        """
        Замена конфигурации: DaijiConfig или dict с полями DaijiConfig.

        Raises:
            ConfigurationError: значение не является конфигурацией или нарушает ограничения
        """
        if isinstance(value, Mapping):
            value = DaijiConfig(**value)
        elif not isinstance(value, DaijiConfig):
            raise ConfigurationError(
                f"Expected DaijiConfig or mapping, got {type(value).__name__}"
            )
        self._renderer = DaijiRenderer(value)

    def _update(self, **changes) -> None:
        self.config = self.config.replace(**changes)

    @property
    def large_unit_names(self) -> tuple[str, ...]:
        """Имена 4-значных групп (индекс 0 = без имени)."""
        return self.config.large_unit_names

    @large_unit_names.setter
    def large_unit_names(self, value: Sequence[str]) -> None:
        self._update(large_unit_names=tuple(value))

    @property
    def positional_unit_names(self) -> tuple[str, ...]:
        """Имена 千/百/拾/единиц; не менее 4 элементов."""
        return self.config.positional_unit_names

    @positional_unit_names.setter
    def positional_unit_names(self, value: Sequence[str]) -> None:
        self._update(positional_unit_names=tuple(value))

    @property
    def digit_glyphs(self) -> tuple[str, ...]:
        """Глифы цифр 0-9; не менее 10 элементов."""
        return self.config.digit_glyphs

    @digit_glyphs.setter
    def digit_glyphs(self, value: Sequence[str]) -> None:
        self._update(digit_glyphs=tuple(value))

    @property
    def append_one_before_small_units(self) -> bool:
        return self.config.append_one_before_small_units

    @append_one_before_small_units.setter
    def append_one_before_small_units(self, value: bool) -> None:
        self._update(append_one_before_small_units=value)

    @property
    def overflow_policy(self) -> OverflowPolicy:
        return self.config.overflow_policy

    @overflow_policy.setter
    def overflow_policy(self, value: OverflowPolicy) -> None:
        self._update(overflow_policy=value)

    # -------------------------------------------------------------------------
    # Конвертация
    # -------------------------------------------------------------------------

    def normalize(self, text: str) -> NumeralDecomposition:
        """
        Числовая строка → NumeralDecomposition без экспоненты.

        Raises:
            MalformedNumeralError: Если строка некорректна
        """
        return self._normalizer.normalize(text)

    def convert_numeral_string(self, text: str) -> str:
        """
        Числовая строка ("31.4E-1", "-1,234") → строка даидзи.

        Raises:
            MalformedNumeralError: Если строка некорректна
            LargeUnitOverflowError: Если не хватает имён групп при OverflowPolicy.FAIL
        """
        decomposition = self.normalize(text)
        decomposition.dump()
        return self._renderer.render(decomposition)

    def convert_number(self, value: NumericValue) -> str:
        """
        Число (int, float, Decimal) → строка даидзи.

        Raises:
            TypeError: Если тип не поддерживается
            MalformedNumeralError: Если значение NaN/Inf
            LargeUnitOverflowError: Если не хватает имён групп при OverflowPolicy.FAIL
        """
        text = format_numeric_value(value)
        logger.debug("Formatted %r as %s", value, text)
        return self.convert_numeral_string(text)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

# Конвертер с конфигурацией по умолчанию (не перенастраивается)
_DEFAULT_CONVERTER = DaijiConverter()


def convert_number(value: NumericValue) -> str:
    """Число → строка даидзи с конфигурацией по умолчанию."""
    return _DEFAULT_CONVERTER.convert_number(value)


def convert_numeral_string(text: str) -> str:
    """Числовая строка → строка даидзи с конфигурацией по умолчанию."""
    return _DEFAULT_CONVERTER.convert_numeral_string(text)
