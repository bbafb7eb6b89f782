"""Централизованное описание путей приложения."""

from __future__ import annotations

from pathlib import Path


# CONFIG_DIR: базовая директория настроек, логов и файлов переопределений
CONFIG_DIR = Path.home() / ".thingamablog"

LOGS_DIR_NAME = "logs"
OVERRIDES_DIR_NAME = "l10n"
