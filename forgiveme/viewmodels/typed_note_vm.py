from __future__ import annotations

from typing import Optional

TYPE_INTERVAL_MS = 60


class TypedNoteVM:
    """Reveals a note one character per tick."""

    def __init__(self, text: str = "", *, interval_ms: int = TYPE_INTERVAL_MS) -> None:
        self.interval_ms = interval_ms
        self.reset(text)

    def reset(self, text: Optional[str]) -> None:
        self.text = str(text or "")
        self.shown = 0

    @property
    def display(self) -> str:
        return self.text[: self.shown]

    @property
    def done(self) -> bool:
        return self.shown >= len(self.text)

    def tick(self) -> bool:
        """Advance one character; returns ``True`` while more ticks are needed."""
        if not self.done:
            self.shown += 1
        return not self.done
