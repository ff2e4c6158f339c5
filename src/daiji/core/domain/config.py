"""
DaijiConfig — Конфигурация рендеринга даидзи

Immutable Pydantic модель с таблицами имён и флагами рендеринга.
Задаётся один раз при создании конвертера и далее только читается;
перенастройка конвертера заменяет объект конфигурации целиком.

Таблицы:
- large_unit_names: имена 4-значных групп (индекс 0 = без имени, 1 = 万, 2 = 億, ...)
- positional_unit_names: имена позиций внутри группы [千, 百, 拾, <единицы>]
- digit_glyphs: глифы цифр 0-9 (глиф 0 используется только для нулевого результата)
"""

from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, Field, ValidationError, field_validator

from daiji.core.errors import ConfigurationError

# =============================================================================
# ТАБЛИЦЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Имена 4-значных групп (大数), по 10^4 на шаг
DEFAULT_LARGE_UNIT_NAMES: Final[tuple[str, ...]] = (
    "",
    "万",
    "億",
    "兆",
    "京",
    "垓",
    "𥝱",
    "穣",
    "溝",
    "澗",
    "正",
    "載",
    "極",
    "恒河沙",
    "阿僧祇",
    "那由他",
    "不可思議",
)

# 千, 百, 拾 и разряд единиц (без имени)
DEFAULT_POSITIONAL_UNIT_NAMES: Final[tuple[str, ...]] = ("千", "百", "拾", "")

# Глифы даидзи для 0-9
DEFAULT_DIGIT_GLYPHS: Final[tuple[str, ...]] = (
    "零",
    "壱",
    "弐",
    "参",
    "四",
    "五",
    "六",
    "七",
    "八",
    "九",
)

# Минимальные размеры таблиц
POSITIONAL_UNIT_COUNT: Final[int] = 4
DIGIT_GLYPH_COUNT: Final[int] = 10


# =============================================================================
# ENUMS
# =============================================================================


class OverflowPolicy(str, Enum):
    """Поведение при индексе группы за пределами large_unit_names."""

    FAIL = "fail"
    OMIT_UNIT = "omit_unit"


# =============================================================================
# CONFIG MODEL
# =============================================================================


class DaijiConfig(BaseModel):
    """
    Конфигурация рендеринга.

    Любое нарушение ограничений при создании (прямой вызов, replace,
    загрузка из файла) поднимается как ConfigurationError, а не как
    ValidationError Pydantic.
    """

    large_unit_names: tuple[str, ...] = Field(
        DEFAULT_LARGE_UNIT_NAMES, min_length=1, description="Имена 4-значных групп"
    )
    positional_unit_names: tuple[str, ...] = Field(
        DEFAULT_POSITIONAL_UNIT_NAMES,
        min_length=POSITIONAL_UNIT_COUNT,
        description="Имена позиций 千/百/拾/единицы",
    )
    digit_glyphs: tuple[str, ...] = Field(
        DEFAULT_DIGIT_GLYPHS, min_length=DIGIT_GLYPH_COUNT, description="Глифы цифр 0-9"
    )
    append_one_before_small_units: bool = Field(
        True, description="Писать 壱 перед 千/百/拾"
    )
    overflow_policy: OverflowPolicy = Field(
        OverflowPolicy.OMIT_UNIT, description="Политика переполнения large_unit_names"
    )

    model_config = {"frozen": True}

    @field_validator("digit_glyphs", mode="before")
    @classmethod
    def split_glyph_string(cls, v: Any) -> Any:
        """Строка "零壱弐..." допускается как таблица глифов."""
        if isinstance(v, str):
            return tuple(v)
        return v

    @field_validator("digit_glyphs")
    @classmethod
    def validate_single_characters(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Каждый глиф: ровно один символ."""
        for index, glyph in enumerate(v):
            if len(glyph) != 1:
                raise ValueError(f"digit glyph #{index} must be a single character, got {glyph!r}")
        return v

    def __init__(self, **data: Any) -> None:
        """
        Raises:
            ConfigurationError: если таблица слишком короткая или глиф некорректен
        """
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise ConfigurationError(_describe_errors(e)) from e

    def replace(self, **changes: Any) -> "DaijiConfig":
        """Новая конфигурация с изменёнными полями (с повторной валидацией)."""
        fields = self.model_dump()
        fields.update(changes)
        return DaijiConfig(**fields)


def _describe_errors(error: ValidationError) -> str:
    parts = []
    for item in error.errors():
        location = ".".join(str(p) for p in item["loc"]) or "config"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)
