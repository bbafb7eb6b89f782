"""Исключения подсистемы локализации."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

LOGGER = logging.getLogger(__name__)


class L10nError(Exception):
    """Базовое исключение локализации с контекстом для журнала."""

    def __init__(self, message: str, *, context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.context = context or {}
        super().__init__(message)
        LOGGER.error("%s | context=%s", message, self.context)


class UnsupportedLanguageError(L10nError):
    """Запрошенный язык не поддерживается или его пакет перевода не загрузился."""

    def __init__(self, language: str, reason: str) -> None:
        self.language = language
        self.reason = reason
        super().__init__(
            f"Translation for language '{language}' is not available: {reason}",
            context={"language": language, "reason": reason},
        )


class OverridePersistenceError(L10nError):
    """Ошибка записи файла пользовательских переопределений."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(
            f"Unable to save translation overrides to '{path}': {reason}",
            context={"path": str(path), "reason": reason},
        )


class FieldSetFormatError(L10nError, ValueError):
    """Некорректные данные в формате key=value."""

    def __init__(self, reason: str, line_number: Optional[int] = None) -> None:
        self.reason = reason
        self.line_number = line_number
        location = f" (line {line_number})" if line_number is not None else ""
        super().__init__(
            f"Malformed key=value data{location}: {reason}",
            context={"reason": reason, "line": line_number},
        )
