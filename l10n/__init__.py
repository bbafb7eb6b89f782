"""Сервис локализации строк интерфейса с пользовательскими переопределениями."""

__version__ = "1.0.0"
