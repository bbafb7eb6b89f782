"""Упорядоченное хранилище строк в простом формате key=value."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Iterator, Mapping, Optional, TextIO, Tuple

from l10n.i18n.exceptions import FieldSetFormatError

END_MARKER = "End"
COMMENT_PREFIX = "#"
_FORBIDDEN_VALUE_CHARS = ("\r", "\n")


class FieldSet:
    """Упорядоченное отображение ключ → строка.

    Формат на диске: по одной записи ``key=value`` в строке, пустые строки и
    строки, начинающиеся с ``#``, пропускаются, строка ``End`` обязательна
    и завершает набор: поток без неё считается обрезанным.
    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None) -> None:
        self._entries: Dict[str, str] = {}
        if entries:
            for key, value in entries.items():
                self.put_overwrite(key, value)

    # ------------------------------------------------------------------ I/O --
    @classmethod
    def read_from(cls, stream: Iterable[str], *, allow_multiple: bool = False) -> "FieldSet":
        """Читает набор из текстового потока."""

        result = cls()
        for line_number, raw_line in enumerate(stream, start=1):
            line = raw_line.rstrip("\r\n")
            if not line.strip() or line.lstrip().startswith(COMMENT_PREFIX):
                continue
            key, separator, value = line.partition("=")
            if not separator:
                if line.strip() == END_MARKER:
                    break
                raise FieldSetFormatError(f"no '=' found in {line!r}", line_number)
            if key in result._entries and not allow_multiple:
                raise FieldSetFormatError(f"duplicate key {key!r}", line_number)
            try:
                result.put_overwrite(key, value)
            except FieldSetFormatError as exc:
                raise FieldSetFormatError(exc.reason, line_number) from exc
        else:
            raise FieldSetFormatError(f"stream ended before the '{END_MARKER}' marker")
        return result

    @classmethod
    def read_file(cls, path: Path) -> "FieldSet":
        """Читает набор из файла в кодировке UTF-8."""

        with path.open("r", encoding="utf-8") as stream:
            return cls.read_from(stream)

    def write_to(self, stream: TextIO) -> None:
        """Записывает все пары в порядке добавления и маркер конца."""

        for key, value in self._entries.items():
            stream.write(f"{key}={value}\n")
        stream.write(f"{END_MARKER}\n")

    # ------------------------------------------------------------------ API --
    def get(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    def put_overwrite(self, key: str, value: str) -> None:
        """Добавляет или заменяет значение ключа."""

        if (
            not key
            or "=" in key
            or key.lstrip().startswith(COMMENT_PREFIX)
            or any(char in key for char in _FORBIDDEN_VALUE_CHARS)
        ):
            raise FieldSetFormatError(f"invalid key {key!r}")
        if any(char in value for char in _FORBIDDEN_VALUE_CHARS):
            raise FieldSetFormatError(f"value for {key!r} contains a line break")
        self._entries[key] = value

    def remove_value(self, key: str) -> None:
        self._entries.pop(key, None)

    def keys(self) -> Tuple[str, ...]:
        return tuple(self._entries.keys())

    def to_dict(self) -> Dict[str, str]:
        return dict(self._entries)

    def copy(self) -> "FieldSet":
        clone = FieldSet()
        clone._entries = dict(self._entries)
        return clone

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldSet):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    def __repr__(self) -> str:
        return f"FieldSet({self._entries!r})"
