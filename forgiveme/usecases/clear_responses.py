from __future__ import annotations

from dataclasses import dataclass

from forgiveme.domain.response_log import Confirmation, ResponseLog


@dataclass
class ClearResponses:
    log: ResponseLog

    def __call__(self, confirm: Confirmation) -> bool:
        return self.log.clear(confirm)
