from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable

from forgiveme.domain.entities import Answer, ResponseRecord, Screen
from forgiveme.domain.ports import UseCaseError
from forgiveme.domain.response_log import ResponseLog
from forgiveme.domain.time_utils import to_epoch_ms, to_iso_utc, utc_now


@dataclass
class RecordResponse:
    log: ResponseLog
    clock: Callable[[], datetime] = field(default=utc_now)

    def __call__(self, name: Any, answer: Any, page_at: Screen) -> ResponseRecord:
        trimmed = name.strip() if isinstance(name, str) else ""
        if not trimmed:
            raise UseCaseError("NAME_REQUIRED", "Please enter your name first.")
        try:
            parsed = Answer.parse(answer)
        except ValueError as exc:
            raise UseCaseError("INVALID_ANSWER", str(exc))

        moment = self.clock()
        record = ResponseRecord(
            id=self._next_id(to_epoch_ms(moment)),
            name=trimmed,
            answer=parsed.value,
            time=to_iso_utc(moment),
            page_at=Screen(page_at).value,
        )
        self.log.append(record)
        return record

    def _next_id(self, candidate: int) -> int:
        # Two answers within the same millisecond still get distinct ids.
        head = self.log.latest()
        if head is not None and isinstance(head.id, int) and candidate <= head.id:
            return head.id + 1
        return candidate
