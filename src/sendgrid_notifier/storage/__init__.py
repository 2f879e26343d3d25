"""Persistent settings stores."""

from __future__ import annotations

from .json_file import JsonFileSettingsStore

__all__ = ["JsonFileSettingsStore"]
