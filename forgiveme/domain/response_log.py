from __future__ import annotations

import json
import logging
import re
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple, Union

from forgiveme.domain.entities import ResponseRecord
from forgiveme.domain.ports import KeyValueStorePort, NotifierPort

DEFAULT_STORAGE_KEY = "forgive_me_responses_v1"

# Slot names double as file names in the local adapter.
STORAGE_KEY_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")

Confirmation = Union[bool, Callable[[], bool]]


def is_valid_storage_key(key: Any) -> bool:
    return isinstance(key, str) and STORAGE_KEY_PATTERN.match(key) is not None


class ResponseLog:
    """
    Ordered, most-recent-first collection of response records.

    The in-memory list is authoritative for the session. Every mutation is
    mirrored into a single slot of a key-value store as a JSON array; mirror
    failures are logged and otherwise ignored so the UI never stalls on them.
    Several processes sharing one store overwrite each other (last writer wins).
    """

    def __init__(
        self,
        storage: KeyValueStorePort,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
        notifier: Optional[NotifierPort] = None,
    ) -> None:
        if not is_valid_storage_key(storage_key):
            raise ValueError(f"Invalid storage key: {storage_key!r}")
        self._log = logging.getLogger(__name__)
        self._storage = storage
        self._storage_key = storage_key
        self._notifier = notifier
        self._records: List[ResponseRecord] = []

    @property
    def storage_key(self) -> str:
        return self._storage_key

    def __len__(self) -> int:
        return len(self._records)

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #
    def append(self, record: ResponseRecord) -> None:
        """Insert ``record`` at the head, mirror the log, then notify."""
        self._records.insert(0, record)
        self._persist()
        self._dispatch(record)

    def all(self) -> Tuple[ResponseRecord, ...]:
        """Snapshot of the records, newest first."""
        return tuple(self._records)

    def latest(self) -> Optional[ResponseRecord]:
        return self._records[0] if self._records else None

    def clear(self, confirm: Confirmation) -> bool:
        """Drop every record and the mirror slot once ``confirm`` agrees."""
        agreed = confirm() if callable(confirm) else confirm
        if not agreed:
            return False
        self._records = []
        try:
            self._storage.remove(self._storage_key)
        except Exception as exc:
            self._log.warning("Could not erase response mirror '%s': %s", self._storage_key, exc)
        self._log.info("Response log cleared")
        return True

    def load(self) -> None:
        """Replace in-memory records with the mirrored ones; bad content yields an empty log."""
        self._records = []
        try:
            raw = self._storage.get(self._storage_key)
        except Exception as exc:
            self._log.warning("Could not read response mirror '%s': %s", self._storage_key, exc)
            return
        if not raw:
            return
        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as exc:
            self._log.warning("Discarding unreadable response mirror: %s", exc)
            return
        if not isinstance(data, list):
            self._log.warning(
                "Discarding response mirror with %s top level", type(data).__name__
            )
            return

        records = self._hydrate(data)
        self._records = records
        self._log.debug("Loaded %d response(s) from '%s'", len(records), self._storage_key)

    # ------------------------------------------------------------------ #
    # Internal utilities
    # ------------------------------------------------------------------ #
    def _hydrate(self, items: Sequence[Any]) -> List[ResponseRecord]:
        records: List[ResponseRecord] = []
        odd = 0
        for payload in items:
            if isinstance(payload, Mapping):
                records.append(ResponseRecord.from_payload(payload))
            else:
                # Non-object items survive as name-only records.
                records.append(ResponseRecord.placeholder())
                odd += 1
        if odd:
            self._log.warning("Kept %d non-object response item(s) as empty records", odd)
        return records

    def _persist(self) -> None:
        try:
            payload = json.dumps(
                [record.to_dict() for record in self._records],
                ensure_ascii=False,
            )
            self._storage.set(self._storage_key, payload)
        except Exception as exc:
            self._log.warning("Could not persist response log: %s", exc)

    def _dispatch(self, record: ResponseRecord) -> None:
        if self._notifier is None:
            return
        try:
            self._notifier.notify(record)
        except Exception as exc:
            self._log.debug("Notifier rejected record %s: %s", record.id, exc)


__all__ = [
    "Confirmation",
    "DEFAULT_STORAGE_KEY",
    "ResponseLog",
    "STORAGE_KEY_PATTERN",
    "is_valid_storage_key",
]
