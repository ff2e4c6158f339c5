"""
Contract Validation Module

Модуль для валидации JSON конфигурации daiji.
"""

from .validators import (
    DaijiConfigValidator,
    config_from_mapping,
    load_config_file,
    validate_daiji_config,
)

__all__ = [
    # Classes
    "DaijiConfigValidator",
    # Functions
    "validate_daiji_config",
    "config_from_mapping",
    "load_config_file",
]
