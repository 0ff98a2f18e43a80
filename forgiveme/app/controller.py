"""Adapter and use-case wiring shared by the desktop and web runtimes.

This module owns construction of the storage adapter, the optional webhook
notifier, the response log and the use-case objects that depend on values in
:class:`forgiveme.viewmodels.settings_vm.SettingsVM`.
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional

from ..adapters.storage_local import StorageLocal
from ..adapters.webhook_notifier import build_notifier
from ..domain.ports import KeyValueStorePort, NotifierPort
from ..domain.response_log import ResponseLog
from ..usecases.clear_responses import ClearResponses
from ..usecases.record_response import RecordResponse
from ..viewmodels.settings_vm import SettingsVM


class AppController:
    """Create and cache runtime adapters/use-cases from settings state.

    Call chain:
        ``forgiveme.app.main.App`` and ``forgiveme.web_ui.main`` create one
        instance, call ``load_settings`` and then ``ensure_ready`` before
        binding view-models to ``uc_record`` / ``uc_clear``.
    """

    def __init__(
        self,
        settings_vm: SettingsVM,
        *,
        storage: Optional[KeyValueStorePort] = None,
        notifier: Optional[NotifierPort] = None,
    ) -> None:
        """Initialize controller with settings-backed lazy dependencies.

        Args:
            settings_vm: Settings state holding pin, storage key, webhook URL
                and data directory.
            storage: Optional key-value store; defaults to ``StorageLocal``
                rooted at ``settings_vm.data_dir``.
            notifier: Optional notifier; defaults to a webhook notifier when a
                URL is configured.
        """
        self._log = logging.getLogger(__name__)
        self.settings_vm = settings_vm
        self._storage = storage
        self._notifier = notifier
        self._response_log: Optional[ResponseLog] = None
        self.uc_record: Optional[RecordResponse] = None
        self.uc_clear: Optional[ClearResponses] = None

    @property
    def storage(self) -> Optional[KeyValueStorePort]:
        return self._storage

    @property
    def response_log(self) -> Optional[ResponseLog]:
        """Return the loaded response log once ``ensure_ready`` ran."""
        return self._response_log

    def load_settings(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Layer defaults, ``settings.json`` in the data directory and env overrides.

        Unreadable or invalid settings files are logged and skipped.
        """
        self.settings_vm.apply_env(environ)
        settings_store = StorageLocal(root_dir=self.settings_vm.data_dir)
        try:
            payload = settings_store.load_user_settings()
        except (OSError, ValueError) as exc:
            self._log.warning("Could not read settings: %s", exc)
            payload = None
        if payload is not None:
            try:
                self.settings_vm.apply_dict(payload)
            except ValueError as exc:
                self._log.warning("Ignoring settings file: %s", exc)
        self.settings_vm.apply_env(environ)

    def reset(self) -> None:
        """Drop cached objects so the next ``ensure_ready`` rebuilds them."""
        self._response_log = None
        self.uc_record = None
        self.uc_clear = None

    def ensure_ready(self) -> ResponseLog:
        """Build (once) and return the response log with its use-cases.

        Side Effects:
            Loads the persisted mirror into memory on first call.
        """
        if self._response_log is not None:
            return self._response_log

        cfg = self.settings_vm.config
        if self._storage is None:
            self._storage = StorageLocal(root_dir=cfg.data_dir)
        if self._notifier is None:
            self._notifier = build_notifier(cfg.webhook_url, timeout_s=cfg.webhook_timeout_s)

        log = ResponseLog(self._storage, storage_key=cfg.storage_key, notifier=self._notifier)
        log.load()
        self._log.info(
            "Response log ready: %d record(s), webhook %s",
            len(log),
            "on" if self._notifier is not None else "off",
        )
        self._response_log = log
        self.uc_record = RecordResponse(log)
        self.uc_clear = ClearResponses(log)
        return log
