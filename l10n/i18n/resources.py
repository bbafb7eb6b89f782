"""Поиск упакованных файлов перевода."""

from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import BinaryIO, Optional, Protocol, runtime_checkable

DEFAULT_RESOURCE_PACKAGE = "l10n.i18n.strings"
TRANSLATION_SUFFIX = ".properties"


def translation_resource_name(prefix: str, language: str) -> str:
    """Имя ресурса вида ``<prefix-as-path>/<prefix><language>.properties``."""

    return f"{prefix.replace('.', '/')}{prefix}{language}{TRANSLATION_SUFFIX}"


@runtime_checkable
class ResourceLocator(Protocol):
    """Источник именованных ресурсов."""

    def open_resource(self, name: str) -> Optional[BinaryIO]:
        """Возвращает байтовый поток ресурса или None, если он не найден."""


class PackageResourceLocator:
    """Ищет ресурсы внутри установленного пакета через importlib.resources."""

    def __init__(self, package: str = DEFAULT_RESOURCE_PACKAGE) -> None:
        self._package = package
        self._logger = logging.getLogger(__name__)

    def open_resource(self, name: str) -> Optional[BinaryIO]:
        try:
            resource = resources.files(self._package)
        except ModuleNotFoundError:
            self._logger.warning("Resource package %s is not importable", self._package)
            return None
        for part in name.split("/"):
            resource = resource.joinpath(part)
        if not resource.is_file():
            return None
        return resource.open("rb")


class DirectoryResourceLocator:
    """Ищет ресурсы в каталоге файловой системы."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def open_resource(self, name: str) -> Optional[BinaryIO]:
        path = self._root / name
        if not path.is_file():
            return None
        return path.open("rb")
