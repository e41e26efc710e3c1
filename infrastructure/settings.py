"""Settings access helpers for JSON-based configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class JsonSettings:
    """Lightweight JSON settings reader with dotted-key access."""

    def __init__(self, settings_path: str | Path) -> None:
        self._path = Path(settings_path)
        if not self._path.exists():
            raise FileNotFoundError(f"settings.json not found: {self._path}")
        with self._path.open("r", encoding="utf-8") as f:
            self._data = json.load(f)

    @property
    def base_dir(self) -> Path:
        """Directory containing the settings file."""
        return self._path.parent

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return value for dotted `key`, or `default` if not present."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if isinstance(node, dict) and part in node:
                node = node[part]
            else:
                return default
        return node

    def get_int(self, key: str, default: int) -> int:
        """Return `key` as a positive int, or `default` when missing or invalid."""
        try:
            value = int(self.get(key, default) or default)
        except (ValueError, TypeError):
            return default
        return value if value > 0 else default

    def resolve_path(self, key: str, default: str) -> Path:
        """Return `key` as a path, relative paths resolved against `base_dir`."""
        raw = self.get(key, default)
        path = Path(str(raw or default)).expanduser()
        if not path.is_absolute():
            path = self.base_dir / path
        return path
