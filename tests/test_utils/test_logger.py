"""Проверки подсистемы журналирования."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from l10n.utils.logger import LOG_FILE_NAME, configure_logging, get_logger, resolve_log_level


def test_configure_logging_creates_file(tmp_path: Path) -> None:
    """После конфигурации появляется файл журнала с записью."""

    log_dir = tmp_path / "logs"
    configure_logging(log_dir, level_name="INFO", max_bytes=1024, backup_count=1, console=False)

    logger = get_logger("l10n.test")
    logger.info("log entry")
    for handler in logging.getLogger().handlers:
        handler.flush()

    log_file = log_dir / LOG_FILE_NAME
    assert log_file.exists()
    assert "log entry" in log_file.read_text(encoding="utf-8")


def test_resolve_log_level() -> None:
    assert resolve_log_level("debug") == logging.DEBUG
    with pytest.raises(ValueError):
        resolve_log_level("INVALID")
    with pytest.raises(ValueError):
        resolve_log_level("BASIC_FORMAT")
