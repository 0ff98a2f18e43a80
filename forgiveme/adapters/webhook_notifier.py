"""Webhook delivery of recorded responses.

Every call to :meth:`WebhookNotifier.notify` posts the record on a short-lived
daemon thread and returns immediately. Each delivery opens and closes its own
session. Outcomes are logged at DEBUG and never reported back to the caller;
there is no retry.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Optional

from forgiveme.adapters.api_errors import ApiError, raise_for_status
from forgiveme.adapters.http_client import HttpConfig, JsonSession
from forgiveme.domain.entities import ResponseRecord
from forgiveme.domain.ports import NotifierPort


class WebhookNotifier(NotifierPort):
    """Fire-and-forget JSON POST to a configured URL."""

    def __init__(
        self,
        url: str,
        *,
        session_factory: Optional[Callable[[], JsonSession]] = None,
        timeout_s: float = 5,
        background: bool = True,
    ) -> None:
        if not isinstance(url, str) or not url.strip():
            raise ValueError("Webhook URL must be a non-empty string.")
        self.url = url.strip()
        self._session_factory = session_factory or (
            lambda: JsonSession(HttpConfig(request_timeout_s=timeout_s))
        )
        self._background = background
        self._log = logging.getLogger(__name__)

    def notify(self, record: ResponseRecord) -> None:
        payload = self.build_payload(record)
        if not self._background:
            self._deliver(payload)
            return
        worker = threading.Thread(
            target=self._deliver,
            args=(payload,),
            name=f"webhook-{payload.get('id')}",
            daemon=True,
        )
        worker.start()

    @staticmethod
    def build_payload(record: ResponseRecord) -> Dict[str, Any]:
        return {
            "id": record.id,
            "name": record.name,
            "answer": record.answer,
            "time": record.time,
            "pageAt": record.page_at,
        }

    def _deliver(self, payload: Dict[str, Any]) -> None:
        try:
            with self._session_factory() as session:
                resp = session.post(self.url, json_body=payload)
                raise_for_status(resp, f"POST {self.url}")
        except ApiError as exc:
            self._log.debug("Webhook delivery failed: %s", exc)
            return
        except Exception as exc:
            self._log.debug("Webhook delivery failed unexpectedly: %s", exc)
            return
        self._log.debug("Webhook accepted response %s", payload.get("id"))


def build_notifier(url: Optional[str], *, timeout_s: float = 5) -> Optional[WebhookNotifier]:
    """Return a notifier for ``url`` or ``None`` when no webhook is configured."""
    if not url or not str(url).strip():
        return None
    return WebhookNotifier(str(url), timeout_s=timeout_s)


__all__ = ["WebhookNotifier", "build_notifier"]
