"""A string-keyed store persisted as a single JSON object on disk.

The cart and the applied promotion each live under their own key, the
same way the storefront kept them in browser local storage.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from farmcart.domain.exceptions import StorageError


class JsonKeyValueStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def get(self, key: str) -> Any | None:
        return self._load_raw().get(key)

    def set(self, key: str, value: Any) -> None:
        records = self._load_raw()
        records[key] = value
        self._persist_raw(records)

    def delete(self, key: str) -> None:
        records = self._load_raw()
        if records.pop(key, None) is not None:
            self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, Any]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise StorageError(f"Corrupt session file {self._file_path}: {exc}") from exc
        if not isinstance(records, dict):
            raise StorageError(f"Session file {self._file_path} must hold a JSON object")
        return records

    def _persist_raw(self, records: dict[str, Any]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2, ensure_ascii=False) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
