"""Сервис переводов строк интерфейса.

Порядок поиска ключа: пользовательские переопределения активного языка,
пакет перевода активного языка, пакет языка по умолчанию и, наконец, сам ключ.
Переопределения сохраняются на диск после каждого изменения.
"""

from __future__ import annotations

import io
import logging
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from l10n.i18n.exceptions import (
    FieldSetFormatError,
    OverridePersistenceError,
    UnsupportedLanguageError,
)
from l10n.i18n.field_set import FieldSet
from l10n.i18n.observers import TranslationObserver
from l10n.i18n.resources import PackageResourceLocator, ResourceLocator, translation_resource_name
from l10n.utils.helpers import (
    normalize_language_code,
    strip_control_characters,
    substitute_placeholders,
)

PREFIX = "l10n."
SUFFIX = ".properties"
OVERRIDE_SUFFIX = ".override" + SUFFIX
BACKUP_SUFFIX = ".bak"

FALLBACK_DEFAULT = "en"
AVAILABLE_LANGUAGES: Tuple[str, ...] = ("en", "de", "fr", "es", "ja")

MNEMONIC_SUFFIX = ".mnemonic"
MNEMONIC_PLACEHOLDER = "_"

Patterns = Union[str, Sequence[str]]


class TranslationService:
    """Хранит активный язык, его перевод, переопределения и перевод по умолчанию.

    Все состояние защищено одной блокировкой: смена языка заменяет перевод и
    переопределения одновременно.
    """

    def __init__(
        self,
        override_dir: Path,
        locator: Optional[ResourceLocator] = None,
        *,
        prefix: str = PREFIX,
        available_languages: Iterable[str] = AVAILABLE_LANGUAGES,
        fallback_language: str = FALLBACK_DEFAULT,
    ) -> None:
        self._available_languages = tuple(available_languages)
        if fallback_language not in self._available_languages:
            raise ValueError(
                f"Fallback language {fallback_language!r} is not one of {self._available_languages}"
            )
        self._override_dir = override_dir
        self._locator: ResourceLocator = locator or PackageResourceLocator()
        self._prefix = prefix
        self._fallback_language = fallback_language
        self._logger = logging.getLogger(__name__)
        self._lock = threading.RLock()
        self._selected_language: Optional[str] = None
        self._current: Optional[FieldSet] = None
        self._override: Optional[FieldSet] = None
        self._fallback: Optional[FieldSet] = None
        self._observers: List[TranslationObserver] = []

    # ------------------------------------------------------------ properties --
    @property
    def selected_language(self) -> Optional[str]:
        """Код активного языка или None, если язык ещё не выбирался."""

        with self._lock:
            return self._selected_language

    @property
    def available_languages(self) -> Tuple[str, ...]:
        return self._available_languages

    @property
    def fallback_language(self) -> str:
        return self._fallback_language

    @property
    def override_dir(self) -> Path:
        return self._override_dir

    # ------------------------------------------------------------ selection --
    def select_language(self, language: str) -> str:
        """Делает язык активным и возвращает его каноничный код.

        При неизвестном коде или неудачной загрузке пакета перевода активным
        становится язык по умолчанию, после чего выбрасывается
        UnsupportedLanguageError.
        """

        with self._lock:
            canonical = normalize_language_code(language, self._available_languages)
            if canonical is None:
                self._logger.error("The requested translation is not available: %s", language)
                self._activate(self._fallback_language)
                raise UnsupportedLanguageError(language, "the requested translation hasn't been found")

            self._logger.info("Changing the current language to: %s", canonical)
            if not self._activate(canonical):
                self._activate(self._fallback_language)
                raise UnsupportedLanguageError(canonical, "unable to load the translation file")
            return canonical

    def _activate(self, language: str) -> bool:
        overrides = self._load_override_file(language)
        current = self.load_translation(language)
        if current is None:
            self._logger.error(
                "The translation file for %s is invalid, an empty template will be used", language
            )
            overrides = FieldSet()

        previous = self._selected_language
        self._selected_language = language
        self._current = current
        self._override = overrides
        self._notify_language_changed(previous, language)
        return current is not None

    def load_translation(self, language: str) -> Optional[FieldSet]:
        """Загружает упакованный перевод; None, если ресурс отсутствует или повреждён."""

        name = translation_resource_name(self._prefix, language)
        try:
            stream = self._locator.open_resource(name)
            if stream is None:
                self._logger.warning("Translation resource %s not found", name)
                return None
            with stream, io.TextIOWrapper(stream, encoding="utf-8-sig") as text:
                return FieldSet.read_from(text)
        except (OSError, UnicodeDecodeError, FieldSetFormatError) as exc:
            self._logger.error("Error while loading the l10n file from %s: %s", name, exc)
            return None

    # ----------------------------------------------------------- resolution --
    def get_string(self, key: str, allow_miss: bool = False) -> Optional[str]:
        """Возвращает перевод ключа.

        При ``allow_miss`` вместо обращения к языку по умолчанию возвращается
        None. Без него результат всегда строка: в крайнем случае сам ключ.
        """

        with self._lock:
            if self._override is not None:
                result = self._override.get(key)
                if result is not None:
                    return result
            if self._current is not None:
                result = self._current.get(key)
                if result is not None:
                    return result
            self._logger.info(
                "The translation for %s hasn't been found (%s)", key, self._selected_language
            )
            if allow_miss:
                return None
            return self.default_string(key)

    def format_string(self, key: str, patterns: Patterns, values: Patterns) -> str:
        """Возвращает перевод с подстановкой значений вместо ``${pattern}``."""

        if isinstance(patterns, str):
            patterns = (patterns,)
        if isinstance(values, str):
            values = (values,)
        text = self.get_string(key)
        return substitute_placeholders(text if text is not None else key, patterns, values)

    def translate(self, key: str, **values: str) -> str:
        """Короткая форма format_string с именованными значениями."""

        return self.format_string(key, list(values.keys()), list(values.values()))

    def default_string(self, key: str) -> str:
        """Перевод ключа на языке по умолчанию или сам ключ."""

        with self._lock:
            result = self._fallback_set().get(key)
        if result is not None:
            return result
        self._logger.error("The default translation for %s hasn't been found", key)
        return key

    def _fallback_set(self) -> FieldSet:
        if self._fallback is None:
            loaded = self.load_translation(self._fallback_language)
            if loaded is None:
                self._logger.error(
                    "The default translation (%s) could not be loaded", self._fallback_language
                )
                loaded = FieldSet()
            self._fallback = loaded
        return self._fallback

    def mnemonic(self, base_key: str) -> str:
        """Символ клавиши-ускорителя из ключа ``<base_key>.mnemonic``."""

        key = base_key + MNEMONIC_SUFFIX
        text = self.get_string(key) or ""
        if text:
            return text[0]
        self._logger.warning("Mnemonic key not found: %s", key)
        return MNEMONIC_PLACEHOLDER

    # ------------------------------------------------------------ overrides --
    def is_overridden(self, key: str) -> bool:
        with self._lock:
            return self._override is not None and key in self._override

    def set_override(self, key: str, value: str) -> None:
        """Задаёт пользовательский перевод ключа и сохраняет переопределения.

        Пустое значение или значение, совпадающее с текущим переводом, удаляет
        переопределение, если только оно не совпадает с переводом по умолчанию.
        """

        key = key.strip()
        value = value.strip()
        with self._lock:
            if self._override is None:
                self._override = FieldSet()
            previous = self._override.get(key)

            if (value == "" or value == self.get_string(key)) and value != self.default_string(key):
                self._override.remove_value(key)
                stored: Optional[str] = None
            else:
                value = strip_control_characters(value)
                try:
                    self._override.put_overwrite(key, value)
                except FieldSetFormatError:
                    self._logger.warning("Override for invalid key %r ignored", key)
                    return
                stored = value
                self._logger.info("Got a new translation key: override set for %s", key)

            try:
                self._save_override_file()
            except OverridePersistenceError as exc:
                self._logger.warning("Override for %s is kept in memory only: %s", key, exc.reason)

            if previous != stored:
                self._notify_override_changed(key, previous, stored)

    def override_file_path(self, language: Optional[str] = None) -> Path:
        """Путь к файлу переопределений языка (по умолчанию активного)."""

        with self._lock:
            code = language or self._selected_language or self._fallback_language
        return self._override_dir / f"{self._prefix}{code}{OVERRIDE_SUFFIX}"

    def _save_override_file(self) -> None:
        final_file = self.override_file_path()
        # Не удаляется при сбое: используется для восстановления при следующем запуске.
        temp_file = _backup_path(final_file)
        self._logger.debug("The temporary filename is: %s", temp_file)
        overrides = self._override if self._override is not None else FieldSet()
        try:
            final_file.parent.mkdir(parents=True, exist_ok=True)
            with temp_file.open("w", encoding="utf-8") as stream:
                overrides.write_to(stream)
            temp_file.replace(final_file)
        except OSError as exc:
            raise OverridePersistenceError(final_file, str(exc)) from exc
        self._logger.info("Override file saved successfully: %s", final_file)

    def _load_override_file(self, language: str) -> Optional[FieldSet]:
        primary = self.override_file_path(language)
        for candidate in (primary, _backup_path(primary)):
            overrides = self._read_override_candidate(candidate)
            if overrides is not None:
                return overrides
        return None

    def _read_override_candidate(self, path: Path) -> Optional[FieldSet]:
        try:
            if not path.is_file() or path.stat().st_size == 0:
                return None
            self._logger.info("Override file detected, loading %s", path)
            return FieldSet.read_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            self._logger.error("IO error while accessing %s: %s", path, exc)
        except FieldSetFormatError:
            self._logger.warning("Override file %s is malformed and was skipped", path)
        return None

    # --------------------------------------------------------------- copies --
    def current_translation(self) -> Optional[FieldSet]:
        """Копия перевода активного языка или None."""

        with self._lock:
            return self._current.copy() if self._current is not None else None

    def override_translation(self) -> Optional[FieldSet]:
        """Копия переопределений активного языка или None."""

        with self._lock:
            return self._override.copy() if self._override is not None else None

    def default_translation(self) -> FieldSet:
        """Копия перевода языка по умолчанию."""

        with self._lock:
            return self._fallback_set().copy()

    # ------------------------------------------------------------ observers --
    def register_observer(self, observer: TranslationObserver) -> None:
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)

    def unregister_observer(self, observer: TranslationObserver) -> None:
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)

    def _notify_language_changed(self, old_language: Optional[str], new_language: str) -> None:
        for observer in list(self._observers):
            try:
                observer.on_language_changed(old_language, new_language)
            except Exception as exc:  # pragma: no cover
                self._logger.error("Observer %s failed: %s", observer, exc, exc_info=True)

    def _notify_override_changed(
        self, key: str, old_value: Optional[str], new_value: Optional[str]
    ) -> None:
        for observer in list(self._observers):
            try:
                observer.on_override_changed(key, old_value, new_value)
            except Exception as exc:  # pragma: no cover
                self._logger.error("Observer %s failed: %s", observer, exc, exc_info=True)


def _backup_path(path: Path) -> Path:
    return path.with_name(path.name + BACKUP_SUFFIX)


# ------------------------------------------------------------------ lifecycle --
_service: Optional[TranslationService] = None
_service_lock = threading.Lock()


def init_service(
    override_dir: Path,
    locator: Optional[ResourceLocator] = None,
    **options: object,
) -> TranslationService:
    """Создаёт сервис переводов процесса, заменяя предыдущий."""

    global _service
    service = TranslationService(override_dir, locator, **options)  # type: ignore[arg-type]
    with _service_lock:
        _service = service
    return service


def get_service() -> TranslationService:
    """Возвращает сервис переводов процесса."""

    with _service_lock:
        if _service is None:
            raise RuntimeError("Translation service is not initialised")
        return _service


def shutdown_service() -> None:
    """Освобождает сервис переводов (при завершении работы и в тестах)."""

    global _service
    with _service_lock:
        _service = None


def set_language(language: str) -> str:
    """Меняет язык сервиса процесса."""

    return get_service().select_language(language)


def translate(key: str, **values: str) -> str:
    """Возвращает перевод ключа; без инициализированного сервиса возвращает сам ключ."""

    with _service_lock:
        service = _service
    if service is None:
        return key
    return service.translate(key, **values)
