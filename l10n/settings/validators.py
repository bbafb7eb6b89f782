"""Валидаторы значений настроек."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional, Pattern, Tuple

ValidationResult = Tuple[bool, str]


class Validator(ABC):
    """Абстрактный валидатор значения."""

    @abstractmethod
    def validate(self, value: Any) -> ValidationResult:
        """Возвращает (True, \"\") при успехе либо (False, описание ошибки)."""


class TypeValidator(Validator):
    """Проверяет тип значения (bool не считается int)."""

    def __init__(self, expected_type: type | Tuple[type, ...]) -> None:
        self.expected_type = expected_type

    def _expected_name(self) -> str:
        if isinstance(self.expected_type, tuple):
            return ", ".join(t.__name__ for t in self.expected_type)
        return self.expected_type.__name__

    def validate(self, value: Any) -> ValidationResult:
        is_bool_as_int = isinstance(value, bool) and self.expected_type is int
        if isinstance(value, self.expected_type) and not is_bool_as_int:
            return True, ""
        return False, f"Expected value of type {self._expected_name()}, got {type(value).__name__}"


class RangeValidator(Validator):
    """Проверяет, что число лежит в заданных границах."""

    def __init__(self, min_value: Optional[Any] = None, max_value: Optional[Any] = None) -> None:
        self.min_value = min_value
        self.max_value = max_value

    def validate(self, value: Any) -> ValidationResult:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False, f"Expected a number, got {type(value).__name__}"
        if self.min_value is not None and value < self.min_value:
            return False, f"Value {value} is out of range [{self.min_value}, {self.max_value}]"
        if self.max_value is not None and value > self.max_value:
            return False, f"Value {value} is out of range [{self.min_value}, {self.max_value}]"
        return True, ""


class EnumValidator(Validator):
    """Проверяет принадлежность значения конечному набору (например, кодов языков)."""

    def __init__(self, allowed_values: Iterable[Any], *, case_sensitive: bool = True) -> None:
        self.allowed_values = list(allowed_values)
        self.case_sensitive = case_sensitive

    def validate(self, value: Any) -> ValidationResult:
        if value in self.allowed_values:
            return True, ""
        if not self.case_sensitive and isinstance(value, str):
            lowered = [str(item).lower() for item in self.allowed_values]
            if value.lower() in lowered:
                return True, ""
        return False, f"Value {value!r} not in allowed values: {self.allowed_values}"


class RegexValidator(Validator):
    """Проверяет строку целиком по регулярному выражению."""

    def __init__(self, pattern: str | Pattern[str]) -> None:
        self.pattern: Pattern[str] = re.compile(pattern) if isinstance(pattern, str) else pattern

    def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return False, "RegexValidator expects string values"
        if self.pattern.fullmatch(value):
            return True, ""
        return False, f"Value '{value}' does not match pattern {self.pattern.pattern!r}"


class CompositeValidator(Validator):
    """Применяет валидаторы по очереди до первой ошибки."""

    def __init__(self, validators: Iterable[Validator]) -> None:
        self.validators: List[Validator] = list(validators)

    def validate(self, value: Any) -> ValidationResult:
        for validator in self.validators:
            is_valid, error = validator.validate(value)
            if not is_valid:
                return False, error
        return True, ""
