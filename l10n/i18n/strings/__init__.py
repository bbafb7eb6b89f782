"""Упакованные файлы перевода."""
