"""Группы настроек с валидацией значений."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Tuple

from l10n.i18n.translator import AVAILABLE_LANGUAGES, PREFIX
from l10n.settings.exceptions import SettingsNotFoundError, SettingsValidationError
from l10n.settings.validators import (
    CompositeValidator,
    EnumValidator,
    RangeValidator,
    RegexValidator,
    TypeValidator,
    Validator,
)

PREFIX_PATTERN = r"^[A-Za-z0-9_]+(\.[A-Za-z0-9_]+)*\.$"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class SettingsGroup(ABC):
    """Абстрактная база для групп настроек."""

    group_name: str = ""

    def __init__(self) -> None:
        self._defaults: Dict[str, Any] = {}
        self._validators: Dict[str, Validator] = {}
        self._values: Dict[str, Any] = {}
        self._initialize_defaults()
        self._setup_validators()
        self.reset_to_defaults()

    @abstractmethod
    def _initialize_defaults(self) -> None:
        """Задаёт значения по умолчанию для группы."""

    @abstractmethod
    def _setup_validators(self) -> None:
        """Привязывает валидаторы к ключам группы."""

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._defaults.keys())

    def get(self, key: str, default: Any = None) -> Any:
        """Возвращает значение настройки."""

        self._require_key(key)
        return self._values.get(key, default)

    def get_default(self, key: str) -> Any:
        self._require_key(key)
        return self._defaults[key]

    def validate(self, key: str, value: Any) -> Tuple[bool, str]:
        validator = self._validators.get(key)
        if not validator:
            return True, ""
        return validator.validate(value)

    def set(self, key: str, value: Any) -> None:
        """Сохраняет значение или выбрасывает SettingsValidationError."""

        self._require_key(key)
        is_valid, error = self.validate(key, value)
        if not is_valid:
            raise SettingsValidationError(
                key=f"{self.group_name}.{key}",
                value=value,
                reason=error,
            )
        self._values[key] = value

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._values)

    def from_dict(self, data: Dict[str, Any]) -> None:
        """Заполняет группу из словаря; неизвестные ключи игнорируются."""

        for key, value in data.items():
            if key in self._defaults:
                self.set(key, value)

    def reset_to_defaults(self) -> None:
        self._values = dict(self._defaults)

    def _require_key(self, key: str) -> None:
        if key not in self._defaults:
            raise SettingsNotFoundError(self.group_name, key)


class L10nSettings(SettingsGroup):
    """Язык интерфейса и расположение файлов переопределений."""

    group_name = "l10n"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "language": "en",
            # Пустая строка: <каталог настроек>/l10n
            "override_dir": "",
            "prefix": PREFIX,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "language": EnumValidator(AVAILABLE_LANGUAGES, case_sensitive=False),
            "override_dir": TypeValidator(str),
            "prefix": CompositeValidator([TypeValidator(str), RegexValidator(PREFIX_PATTERN)]),
        }


class LoggingSettings(SettingsGroup):
    """Настройки журналирования."""

    group_name = "logging"

    def _initialize_defaults(self) -> None:
        self._defaults = {
            "enabled": True,
            "level": "INFO",
            "max_file_size_mb": 10,
            "max_archived_files": 5,
        }

    def _setup_validators(self) -> None:
        self._validators = {
            "enabled": TypeValidator(bool),
            "level": EnumValidator(LOG_LEVELS),
            "max_file_size_mb": RangeValidator(1, 1000),
            "max_archived_files": RangeValidator(1, 50),
        }
