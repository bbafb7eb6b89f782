"""Наблюдатели за сменой языка и пользовательскими переопределениями."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

from l10n.i18n.exceptions import UnsupportedLanguageError

if TYPE_CHECKING:  # pragma: no cover
    from l10n.i18n.translator import TranslationService

LANGUAGE_SETTING = ("l10n", "language")


@runtime_checkable
class TranslationObserver(Protocol):
    """Контракт наблюдателя сервиса переводов."""

    def on_language_changed(self, old_language: Optional[str], new_language: str) -> None:
        """Вызывается после смены активного языка."""

    def on_override_changed(
        self,
        key: str,
        old_value: Optional[str],
        new_value: Optional[str],
    ) -> None:
        """Вызывается после добавления, изменения или удаления переопределения."""


class LoggingTranslationObserver:
    """Наблюдатель, который отправляет события в журнал."""

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def on_language_changed(self, old_language: Optional[str], new_language: str) -> None:
        self._logger.info("Language changed: %s -> %s", old_language, new_language)

    def on_override_changed(
        self,
        key: str,
        old_value: Optional[str],
        new_value: Optional[str],
    ) -> None:
        self._logger.info("Override changed: %s (%r -> %r)", key, old_value, new_value)


class LanguageSettingsObserver:
    """Переключает язык сервиса при изменении настройки ``l10n.language``."""

    def __init__(self, service: "TranslationService") -> None:
        self._service = service
        self._logger = logging.getLogger(__name__)

    def on_setting_changed(
        self,
        group: str,
        key: str,
        old_value: object,
        new_value: object,
    ) -> None:
        if (group, key) != LANGUAGE_SETTING:
            return
        try:
            self._service.select_language(str(new_value))
        except UnsupportedLanguageError as exc:
            self._logger.warning(
                "Language %r rejected (%s), active language is %s",
                new_value,
                exc.reason,
                self._service.selected_language,
            )
