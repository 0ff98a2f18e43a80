from __future__ import annotations
from typing import Dict, Optional
from forgiveme.domain.ports import KeyValueStorePort


class StorageMemory(KeyValueStorePort):
    """In-memory key-value store used for tests and offline development.

    ``fail_writes`` makes ``set`` raise, mimicking a full browser quota.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None, *, fail_writes: bool = False) -> None:
        self.slots: Dict[str, str] = dict(initial or {})
        self.fail_writes = fail_writes

    def get(self, key: str) -> Optional[str]:
        return self.slots.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("Storage quota exceeded")
        self.slots[key] = value

    def remove(self, key: str) -> None:
        self.slots.pop(key, None)
