from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from ..domain.entities import ResponseRecord
from ..domain.time_utils import format_local

CLEAR_PROMPT = "Clear all stored responses?"
EMPTY_TEXT = "No responses yet."


@dataclass(frozen=True)
class ResponseRow:
    key: str
    name: str
    answer: str
    at: str


class AdminVM:
    """Formats recorded responses for the admin overlay."""

    def __init__(
        self,
        *,
        list_responses: Callable[[], Sequence[ResponseRecord]],
        clear_responses: Callable[[Callable[[], bool]], bool],
        confirm: Optional[Callable[[str], bool]] = None,
        on_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        self._list_responses = list_responses
        self._clear_responses = clear_responses
        self.confirm = confirm
        self.on_changed = on_changed

    def rows(self) -> List[ResponseRow]:
        return [self._to_row(record) for record in self._list_responses()]

    def empty_text(self) -> Optional[str]:
        return EMPTY_TEXT if not self._list_responses() else None

    def cmd_clear(self) -> bool:
        """Ask for confirmation, then clear; returns whether records were dropped."""
        ask = self.confirm
        cleared = self._clear_responses(lambda: bool(ask and ask(CLEAR_PROMPT)))
        if cleared and self.on_changed:
            self.on_changed()
        return cleared

    @staticmethod
    def _to_row(record: ResponseRecord) -> ResponseRow:
        return ResponseRow(
            key=str(record.id),
            name=record.name or "Anonymous",
            answer=str(record.answer or ""),
            at=f"At: {format_local(record.time)}",
        )
