"""
Tests for DaijiConfig and JSON Schema Config Contract

Комплексное тестирование:
- Значения по умолчанию и валидация DaijiConfig
- Валидность самой схемы daiji_config
- Валидация правильных и неправильных данных
- Загрузка конфигурации из файла
"""

import json

import pytest
from jsonschema import Draft202012Validator, ValidationError
from pydantic import ValidationError as PydanticValidationError

from daiji.core.contracts import (
    DaijiConfigValidator,
    config_from_mapping,
    load_config_file,
    validate_daiji_config,
)
from daiji.core.domain import (
    DEFAULT_DIGIT_GLYPHS,
    DEFAULT_LARGE_UNIT_NAMES,
    DEFAULT_POSITIONAL_UNIT_NAMES,
    DaijiConfig,
    OverflowPolicy,
)
from daiji.core.errors import ConfigurationError


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_config_data():
    """Полная валидная конфигурация."""
    return {
        "large_unit_names": ["", "万", "億"],
        "positional_unit_names": ["阡", "佰", "拾", ""],
        "digit_glyphs": ["〇", "壱", "弐", "参", "肆", "伍", "陸", "漆", "捌", "玖"],
        "append_one_before_small_units": True,
        "overflow_policy": "fail",
    }


# =============================================================================
# ТЕСТЫ: DaijiConfig
# =============================================================================


class TestDaijiConfig:
    """Модель конфигурации."""

    def test_defaults(self):
        config = DaijiConfig()
        assert config.large_unit_names == DEFAULT_LARGE_UNIT_NAMES
        assert config.positional_unit_names == DEFAULT_POSITIONAL_UNIT_NAMES
        assert config.digit_glyphs == DEFAULT_DIGIT_GLYPHS
        assert config.append_one_before_small_units is True
        assert config.overflow_policy == OverflowPolicy.OMIT_UNIT

    def test_default_table_sizes(self):
        assert len(DEFAULT_LARGE_UNIT_NAMES) == 17
        assert DEFAULT_LARGE_UNIT_NAMES[0] == ""
        assert DEFAULT_LARGE_UNIT_NAMES[-1] == "不可思議"
        assert len(DEFAULT_DIGIT_GLYPHS) == 10

    def test_longer_tables_accepted(self):
        """Лишние элементы допускаются (используются первые 4 / 10)."""
        config = DaijiConfig(
            positional_unit_names=("千", "百", "拾", "", "?"),
            digit_glyphs="零壱弐参四五六七八九X",
        )
        assert len(config.positional_unit_names) == 5
        assert len(config.digit_glyphs) == 11

    def test_direct_construction_raises_configuration_error(self):
        """Короткая таблица при прямом создании модели → ConfigurationError."""
        with pytest.raises(ConfigurationError, match="positional_unit_names"):
            DaijiConfig(positional_unit_names=("千", "百", "拾"))

        with pytest.raises(ConfigurationError, match="digit_glyphs"):
            DaijiConfig(digit_glyphs="零壱弐")

    def test_configuration_error_is_not_pydantic_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            DaijiConfig(positional_unit_names=("千",))

        assert not isinstance(exc_info.value, PydanticValidationError)
        assert isinstance(exc_info.value.__cause__, PydanticValidationError)

    def test_unknown_policy(self):
        with pytest.raises(ConfigurationError, match="overflow_policy"):
            DaijiConfig(overflow_policy="explode")

    def test_replace(self):
        config = DaijiConfig()
        changed = config.replace(append_one_before_small_units=False)

        assert changed.append_one_before_small_units is False
        assert config.append_one_before_small_units is True
        assert changed.digit_glyphs == config.digit_glyphs

    def test_replace_validates(self):
        with pytest.raises(ConfigurationError):
            DaijiConfig().replace(digit_glyphs=("零",))

    def test_frozen(self):
        config = DaijiConfig()
        with pytest.raises(PydanticValidationError):
            config.append_one_before_small_units = False


# =============================================================================
# ТЕСТЫ: Schema
# =============================================================================


class TestSchema:
    """Загрузка и meta-validation схемы."""

    def test_schema_is_valid(self):
        schema = DaijiConfigValidator().schema
        Draft202012Validator.check_schema(schema)

    def test_schema_cached(self):
        assert DaijiConfigValidator().schema is DaijiConfigValidator().schema


class TestConfigValidation:
    """Валидация данных против daiji_config."""

    def test_valid(self, valid_config_data):
        validate_daiji_config(valid_config_data)
        DaijiConfigValidator().validate(valid_config_data)

    def test_empty_object_valid(self):
        validate_daiji_config({})

    @pytest.mark.parametrize(
        "key, value",
        [
            ("positional_unit_names", ["千", "百", "拾"]),
            ("digit_glyphs", ["零"] * 9),
            ("digit_glyphs", ["零"] * 9 + ["九十"]),
            ("large_unit_names", []),
            ("append_one_before_small_units", "yes"),
            ("overflow_policy", "explode"),
        ],
    )
    def test_invalid_values(self, valid_config_data, key, value):
        valid_config_data[key] = value
        with pytest.raises(ValidationError):
            validate_daiji_config(valid_config_data)

    def test_additional_property(self, valid_config_data):
        valid_config_data["rounding"] = "half_up"
        with pytest.raises(ValidationError):
            validate_daiji_config(valid_config_data)


# =============================================================================
# ТЕСТЫ: Загрузка конфигурации
# =============================================================================


class TestConfigLoading:
    """config_from_mapping / load_config_file."""

    def test_from_mapping(self, valid_config_data):
        config = config_from_mapping(valid_config_data)

        assert config.positional_unit_names == ("阡", "佰", "拾", "")
        assert config.digit_glyphs[4] == "肆"
        assert config.overflow_policy == OverflowPolicy.FAIL

    def test_from_mapping_schema_violation(self):
        with pytest.raises(ConfigurationError, match="digit_glyphs"):
            config_from_mapping({"digit_glyphs": ["零"]})

    def test_from_mapping_not_object(self):
        with pytest.raises(ConfigurationError):
            config_from_mapping(["千", "百"])

    def test_load_file(self, tmp_path, valid_config_data):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(valid_config_data, ensure_ascii=False), encoding="utf-8")

        config = load_config_file(str(path))
        assert config.large_unit_names == ("", "万", "億")

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="not valid JSON"):
            load_config_file(path)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config_file(tmp_path / "missing.json")
