from __future__ import annotations
import json, os, tempfile
from typing import Dict, Optional
from forgiveme.domain.ports import KeyValueStorePort
from forgiveme.domain.response_log import is_valid_storage_key


class StorageLocal(KeyValueStorePort):
    """Local filesystem storage: one JSON file per key plus user settings."""

    SETTINGS_FILE = "settings.json"

    def __init__(self, root_dir: str = ".") -> None:
        self.root = root_dir

    # ---- Key-value slots ----
    def get(self, key: str) -> Optional[str]:
        path = self._slot_path(key)
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("Slot values must be strings.")
        self._write_atomic(self._slot_path(key), value)

    def remove(self, key: str) -> None:
        path = self._slot_path(key)
        try:
            os.remove(path)
        except FileNotFoundError:
            pass

    # ---- User settings (JSON) ----
    def load_user_settings(self) -> Optional[Dict]:
        path = os.path.join(self.root, self.SETTINGS_FILE)
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    # ---- Helpers ----
    def _slot_path(self, key: str) -> str:
        if not is_valid_storage_key(key):
            raise ValueError(f"Invalid storage key: {key!r}")
        return os.path.join(self.root, f"{key}.json")

    def _write_atomic(self, path: str, text: str) -> None:
        directory = os.path.dirname(path) or "."
        os.makedirs(directory, exist_ok=True)
        stem = os.path.splitext(os.path.basename(path))[0]
        fd, tmp_path = tempfile.mkstemp(prefix=f"{stem}_", suffix=".tmp", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_path, path)
        except BaseException:
            try:
                os.remove(tmp_path)
            except OSError:
                pass
            raise
