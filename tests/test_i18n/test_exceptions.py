"""Тесты исключений подсистемы локализации."""

from __future__ import annotations

from pathlib import Path

import pytest

from l10n.i18n.exceptions import (
    FieldSetFormatError,
    L10nError,
    OverridePersistenceError,
    UnsupportedLanguageError,
)


def test_unsupported_language_error(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("ERROR")
    error = UnsupportedLanguageError("xx", "not available")
    assert isinstance(error, L10nError)
    assert error.language == "xx"
    assert "'xx'" in str(error)
    assert "not available" in caplog.text


def test_override_persistence_error(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level("ERROR")
    path = tmp_path / "l10n.en.override.properties"
    error = OverridePersistenceError(path, "disk full")
    assert error.path == path
    assert str(path) in str(error)
    assert "disk full" in caplog.text


def test_field_set_format_error_is_value_error() -> None:
    error = FieldSetFormatError("no '=' found", 3)
    assert isinstance(error, ValueError)
    assert "line 3" in str(error)
    assert error.context == {"reason": "no '=' found", "line": 3}
