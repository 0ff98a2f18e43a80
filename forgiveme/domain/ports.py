from __future__ import annotations
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from .entities import ResponseRecord


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class KeyValueStorePort(Protocol):
    """Named string slots, the local mirror of the response log."""

    def get(self, key: str) -> Optional[str]: ...  # None when the slot is absent
    def set(self, key: str, value: str) -> None: ...
    def remove(self, key: str) -> None: ...


class NotifierPort(Protocol):
    """Fire-and-forget delivery of freshly recorded responses."""

    def notify(self, record: "ResponseRecord") -> None: ...
