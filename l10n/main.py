"""Точка входа: настройки, журналирование и сервис переводов."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from l10n import __version__
from l10n.i18n.exceptions import UnsupportedLanguageError
from l10n.i18n.observers import LanguageSettingsObserver
from l10n.i18n.resources import ResourceLocator
from l10n.i18n.translator import TranslationService, init_service
from l10n.settings.observers import LoggingSettingsObserver
from l10n.settings.registry import SettingsRegistry
from l10n.utils.logger import configure_logging, get_logger
from l10n.utils.paths import LOGS_DIR_NAME, OVERRIDES_DIR_NAME

LOGGER = get_logger(__name__)


def initialize_settings(config_path: Path) -> SettingsRegistry:
    """Получает singleton реестр настроек, загружает config.json и журналирует изменения."""

    registry = SettingsRegistry(config_path=config_path)
    registry.load_from_disk()
    registry.register_observer(LoggingSettingsObserver())
    return registry


def setup_logging_from_settings(base_dir: Path, settings: SettingsRegistry) -> None:
    """Настраивает журналирование по группе ``logging``."""

    logging_settings = settings.get_group("logging")
    if not logging_settings.get("enabled"):
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    configure_logging(
        log_dir=base_dir / LOGS_DIR_NAME,
        level_name=logging_settings.get("level", "INFO"),
        max_bytes=logging_settings.get("max_file_size_mb", 10) * 1024 * 1024,
        backup_count=logging_settings.get("max_archived_files", 5),
    )


def initialize_workdir(base_dir: Path) -> bool:
    """Создаёт рабочие каталоги (logs, l10n)."""

    try:
        base_dir.mkdir(parents=True, exist_ok=True)
        (base_dir / LOGS_DIR_NAME).mkdir(exist_ok=True)
        (base_dir / OVERRIDES_DIR_NAME).mkdir(exist_ok=True)
        return True
    except OSError as exc:
        LOGGER.error("Unable to initialise the working directory %s: %s", base_dir, exc)
        return False


def resolve_override_dir(base_dir: Path, settings: SettingsRegistry) -> Path:
    configured = settings.get_value("l10n", "override_dir")
    if configured:
        return Path(configured).expanduser()
    return base_dir / OVERRIDES_DIR_NAME


def create_translation_service(
    base_dir: Path,
    settings: SettingsRegistry,
    locator: Optional[ResourceLocator] = None,
) -> TranslationService:
    """Создаёт сервис переводов процесса и выбирает язык из настроек.

    Если язык недоступен, сервис остаётся на языке по умолчанию.
    """

    service = init_service(
        resolve_override_dir(base_dir, settings),
        locator,
        prefix=settings.get_value("l10n", "prefix"),
    )
    try:
        service.select_language(settings.get_value("l10n", "language"))
    except UnsupportedLanguageError as exc:
        LOGGER.warning("Falling back to %s: %s", service.selected_language, exc.reason)
    settings.register_observer(LanguageSettingsObserver(service))
    return service


def main() -> int:
    """Готовит окружение и инициализирует сервис переводов."""

    home_dir = Path(os.environ.get("L10N_HOME", Path.home()))
    base_dir = home_dir / ".thingamablog"
    if not initialize_workdir(base_dir):
        return 1
    configure_logging(base_dir / LOGS_DIR_NAME)

    settings = initialize_settings(base_dir / "config.json")
    setup_logging_from_settings(base_dir, settings)

    service = create_translation_service(base_dir, settings)
    LOGGER.info(
        "thingamablog-l10n %s started, language: %s", __version__, service.selected_language
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
