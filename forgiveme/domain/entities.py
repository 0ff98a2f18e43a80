from __future__ import annotations

"""Domain value objects shared across adapters, use-cases, and view models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Mapping


class Screen(str, Enum):
    """Mutually exclusive screens of the flow."""

    LANDING = "landing"
    CELEBRATE = "celebrate"
    DECLINED = "declined"


class Answer(str, Enum):
    """Answers the landing screen offers."""

    YES = "yes"
    NO = "no"

    @classmethod
    def parse(cls, value: Any) -> "Answer":
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value == text:
                return member
        raise ValueError(f"Unsupported answer: {value!r}")


# Keys written for every record; anything else found on load rides along in ``extra``.
RECORD_KEYS = ("id", "name", "answer", "time", "pageAt")


@dataclass(frozen=True)
class ResponseRecord:
    """One captured answer together with its capture metadata."""

    id: Any
    """Creation time in epoch milliseconds; kept verbatim when loaded from disk."""

    name: str
    """Trimmed display name, ``""`` when the user left none."""

    answer: str
    """``"yes"`` or ``"no"`` for records captured by this process."""

    time: str
    """ISO-8601 UTC creation timestamp."""

    page_at: str
    """Screen that was active when the answer was captured."""

    extra: Mapping[str, Any] = field(default_factory=dict, compare=False)
    """Unknown keys from a persisted payload, preserved for re-persisting."""

    absent: FrozenSet[str] = field(default=frozenset(), compare=False)
    """Record keys the persisted payload did not carry; they stay absent on write."""

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = dict(self.extra)
        payload["id"] = self.id
        payload["name"] = self.name
        payload["answer"] = self.answer
        payload["time"] = self.time
        payload["pageAt"] = self.page_at
        for key in self.absent:
            payload.pop(key, None)
        return payload

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ResponseRecord":
        """Hydrate a persisted record; a missing or non-string name becomes ``""``.

        Keys other than ``name`` that the payload lacks are remembered in
        ``absent``, so an explicit ``null`` is written back as ``null``.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Response record payload must be a mapping.")
        name = payload.get("name")
        extra = {key: value for key, value in payload.items() if key not in RECORD_KEYS}
        return cls(
            id=payload.get("id"),
            name=name if isinstance(name, str) else "",
            answer=payload.get("answer"),
            time=payload.get("time"),
            page_at=payload.get("pageAt"),
            extra=extra,
            absent=frozenset(key for key in RECORD_KEYS if key != "name" and key not in payload),
        )

    @classmethod
    def placeholder(cls) -> "ResponseRecord":
        """Stand-in for a persisted item that is not an object: only ``name`` is kept."""
        return cls.from_payload({})


__all__ = ["Answer", "RECORD_KEYS", "ResponseRecord", "Screen"]
