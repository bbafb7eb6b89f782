"""Различные вспомогательные функции для работы со строками перевода."""

from __future__ import annotations

import re
from typing import Iterable, Optional, Sequence

_CONTROL_RUNS = re.compile(r"[\r\n\t]+")


def strip_control_characters(value: str) -> str:
    """Удаляет все последовательности символов CR, LF и TAB."""

    return _CONTROL_RUNS.sub("", value)


def normalize_language_code(raw_value: str, available: Iterable[str]) -> Optional[str]:
    """Возвращает код языка в каноничном виде или None, если он не поддерживается."""

    candidate = raw_value.strip().lower()
    for code in available:
        if code.lower() == candidate:
            return code
    return None


def substitute_placeholders(text: str, patterns: Sequence[str], values: Sequence[str]) -> str:
    """Подставляет значения вместо ``${pattern}``.

    Имена шаблонов сравниваются буквально, значения вставляются как есть:
    ``$`` и ``\\`` в них не интерпретируются.
    """

    if len(patterns) != len(values):
        raise ValueError(
            f"Got {len(patterns)} patterns but {len(values)} values for substitution"
        )
    result = text
    for pattern, value in zip(patterns, values):
        placeholder = re.compile(r"\$\{" + re.escape(pattern) + r"\}")
        result = placeholder.sub(lambda _match, replacement=value: replacement, result)
    return result
