"""Проверки механизма наблюдателей за настройками."""

from __future__ import annotations

from pathlib import Path

import pytest

from l10n.settings.observers import LoggingSettingsObserver
from l10n.settings.registry import SettingsRegistry


class DummyObserver:
    def __init__(self) -> None:
        self.triggered = False
        self.payload = None

    def on_setting_changed(
        self, group: str, key: str, old_value: object, new_value: object
    ) -> None:
        self.triggered = True
        self.payload = (group, key, old_value, new_value)


class FailingObserver:
    def __init__(self) -> None:
        self.counter = 0

    def on_setting_changed(
        self, group: str, key: str, old_value: object, new_value: object
    ) -> None:
        self.counter += 1
        raise RuntimeError("observer failed")


@pytest.fixture
def registry(tmp_path: Path) -> SettingsRegistry:
    SettingsRegistry._instance = None  # type: ignore[attr-defined]
    reg = SettingsRegistry(tmp_path / "config.json")
    reg.reset_to_defaults()
    yield reg
    SettingsRegistry._instance = None  # type: ignore[attr-defined]


def test_unregister_observer(registry: SettingsRegistry) -> None:
    observer = DummyObserver()
    registry.register_observer(observer)
    registry.unregister_observer(observer)
    registry.set_value("l10n", "language", "de")
    assert observer.triggered is False


def test_failing_observer_does_not_block_others(registry: SettingsRegistry) -> None:
    failing = FailingObserver()
    observer = DummyObserver()
    registry.register_observer(failing)
    registry.register_observer(observer)
    registry.set_value("l10n", "language", "de")
    assert observer.payload == ("l10n", "language", "en", "de")
    assert failing.counter == 1


def test_logging_observer_does_not_raise(
    registry: SettingsRegistry, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level("INFO")
    registry.register_observer(LoggingSettingsObserver())
    registry.set_value("logging", "level", "DEBUG")
    assert any("Setting changed: logging.level" in record.message for record in caplog.records)
