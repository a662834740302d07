"""Simple JSON-based settings store."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

DEFAULTS = {
    "auto_paste": True,
    "editor_file_tagging": False,
    "backend": "auto",
    "log_level": "INFO",
}


class JsonConfigStore:
    def __init__(self, path: Path | None = None) -> None:
        self._path = path or Path.home() / ".config" / "ghostpaste" / "config.json"
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def get_auto_paste(self) -> bool:
        return self._get_typed("auto_paste", bool)

    def set_auto_paste(self, enabled: bool) -> None:
        self._set("auto_paste", bool(enabled))

    def get_editor_file_tagging(self) -> bool:
        return self._get_typed("editor_file_tagging", bool)

    def set_editor_file_tagging(self, enabled: bool) -> None:
        self._set("editor_file_tagging", bool(enabled))

    def get_backend(self) -> str:
        return self._get_typed("backend", str)

    def set_backend(self, name: str) -> None:
        self._set("backend", name)

    def get_log_level(self) -> str:
        return self._get_typed("log_level", str)

    def set_log_level(self, level: str) -> None:
        self._set("log_level", level.upper())

    def _get_typed(self, key: str, kind: type) -> Any:
        value = self._read_all().get(key)
        if isinstance(value, kind):
            return value
        return DEFAULTS[key]

    def _set(self, key: str, value: Any) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def _read_all(self) -> dict:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError):
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, data: dict) -> None:
        self._path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
