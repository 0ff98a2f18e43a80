"""Shared HTTP transport utilities for outbound adapters.

This module provides a thin wrapper around ``requests.Session`` so adapter
implementations share timeout policy and header construction.

Dependencies:
    - ``requests`` for network I/O.
    - ``forgiveme.adapters.api_errors.ApiTimeoutError`` for typed transport failures.

Call context:
    - Constructed by ``forgiveme/adapters/webhook_notifier.py``.
    - Used only inside the adapter layer; the response log talks to ports.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from forgiveme.adapters.api_errors import ApiTimeoutError


@dataclass
class HttpConfig:
    """Timeout configuration for adapter HTTP calls.

    Attributes:
        request_timeout_s: Timeout in seconds for a single POST.
    """
    request_timeout_s: float = 5


class JsonSession:
    """Requests wrapper that posts JSON bodies.

    Transport-only: callers decide how to treat non-2xx responses. A session
    is not shared between threads; use one per delivery and close it with
    ``with``.
    """

    def __init__(self, cfg: Optional[HttpConfig] = None) -> None:
        """Create a session.

        Args:
            cfg: Timeout settings.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        self.session = requests.Session()
        self.cfg = cfg or HttpConfig()

    @staticmethod
    def _headers(json_body: bool = False) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def post(
        self,
        url: str,
        *,
        json_body: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """Send a JSON POST request.

        Args:
            url: Absolute endpoint URL.
            json_body: Optional payload object serialized to JSON text.
            timeout: Optional timeout override in seconds.

        Returns:
            ``requests.Response`` of the single attempt.

        Raises:
            ApiTimeoutError: If the attempt fails with a timeout or connection error.
        """
        context = f"POST {url}"
        data = None if json_body is None else json.dumps(json_body, ensure_ascii=False).encode("utf-8")
        try:
            return self.session.post(
                url,
                data=data,
                headers=self._headers(json_body=json_body is not None),
                timeout=timeout or self.cfg.request_timeout_s,
            )
        except (req_exc.Timeout, req_exc.ConnectionError) as exc:
            raise ApiTimeoutError(f"Timeout contacting {url}", context=context) from exc

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "JsonSession":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = ["HttpConfig", "JsonSession"]
