"""Схема config.json по умолчанию."""

from __future__ import annotations

from typing import Any, Dict

# DEFAULT_CONFIG служит шаблоном для нового config.json
DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "l10n": {
        "language": "en",
        "override_dir": "",
        "prefix": "l10n.",
    },
    "logging": {
        "enabled": True,
        "level": "INFO",
        "max_file_size_mb": 10,
        "max_archived_files": 5,
    },
}
