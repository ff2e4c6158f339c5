"""
JSON Schema Contract Validators

Модуль для валидации файлов конфигурации согласно JSON Schema контракту.
Использует библиотеку jsonschema для проверки соответствия данных схеме.

Схемы:
- daiji_config.json (таблицы имён и флаги рендеринга)
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, Union

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from daiji.core.domain.config import DaijiConfig
from daiji.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Схема поставляется вместе с пакетом
SCHEMA_PATH: Final[Path] = Path(__file__).parent / "schema" / "daiji_config.json"


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class DaijiConfigValidator:
    """
    Валидатор для daiji_config контракта.

    Схема читается и проходит meta-validation один раз, при первом
    создании валидатора.
    """

    _schema: Dict[str, Any] | None = None

    def __init__(self):
        self.schema = self.load_schema()
        self.validator = Draft202012Validator(self.schema)

    @classmethod
    def load_schema(cls) -> Dict[str, Any]:
        """
        Загрузка daiji_config.json (с кэшированием).

        Raises:
            ValueError: Если схема не проходит meta-validation
        """
        if cls._schema is not None:
            return cls._schema

        with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {SCHEMA_PATH.name}: {e}") from e

        cls._schema = schema
        return schema

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_daiji_config(data: Dict[str, Any]) -> None:
    """
    Валидация данных конфигурации.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DaijiConfigValidator().validate(data)


def config_from_mapping(data: Dict[str, Any]) -> DaijiConfig:
    """
    DaijiConfig из dict (после проверки схемой).

    Отсутствующие ключи получают значения по умолчанию.

    Raises:
        ConfigurationError: нарушение схемы или ограничений модели
    """
    try:
        validate_daiji_config(data)
    except ValidationError as e:
        location = "/".join(str(p) for p in e.absolute_path) or "<root>"
        raise ConfigurationError(f"Invalid daiji config at {location}: {e.message}") from e

    return DaijiConfig(**data)


def load_config_file(path: Union[str, Path]) -> DaijiConfig:
    """
    Загрузка DaijiConfig из JSON файла.

    Raises:
        FileNotFoundError: Если файл не найден
        ConfigurationError: Если файл не является валидным JSON или нарушает схему
    """
    config_path = Path(path)
    with open(config_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Config file {config_path} is not valid JSON: {e}") from e

    config = config_from_mapping(data)
    logger.debug("Loaded daiji config from: %s", config_path)
    return config
