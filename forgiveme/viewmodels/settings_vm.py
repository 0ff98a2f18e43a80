from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from ..domain.response_log import DEFAULT_STORAGE_KEY, is_valid_storage_key
from ..utils.logging import env_forces_debug

DEFAULT_NOTE = "Break your promise if you think I'm truly in love with you"

# Environment variable -> config field; applied on top of persisted settings.
ENV_OVERRIDES: Dict[str, str] = {
    "FORGIVEME_ADMIN_PIN": "admin_pin",
    "FORGIVEME_STORAGE_KEY": "storage_key",
    "FORGIVEME_WEBHOOK_URL": "webhook_url",
    "FORGIVEME_DATA_DIR": "data_dir",
}


@dataclass(frozen=True)
class AppConfig:
    """Deploy-time constants handed to the flow, the log and the notifier."""

    admin_pin: str = "1234"
    storage_key: str = DEFAULT_STORAGE_KEY
    webhook_url: str = ""
    webhook_timeout_s: int = 5
    data_dir: str = "./data"
    celebration_note: str = DEFAULT_NOTE
    debug_logging: bool = False


def _default_config() -> AppConfig:
    return AppConfig(debug_logging=env_forces_debug())


class SettingsVM:
    """Keeps app settings state and validation, no I/O here."""

    def __init__(self, *, config: Optional[AppConfig] = None) -> None:
        self.config = config or _default_config()

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def admin_pin(self) -> str:
        return self.config.admin_pin

    @admin_pin.setter
    def admin_pin(self, value: str) -> None:
        self.config = replace(self.config, admin_pin=self._coerce_pin(value))

    @property
    def storage_key(self) -> str:
        return self.config.storage_key

    @storage_key.setter
    def storage_key(self, value: str) -> None:
        self.config = replace(self.config, storage_key=self._coerce_key(value))

    @property
    def webhook_url(self) -> str:
        return self.config.webhook_url

    @webhook_url.setter
    def webhook_url(self, value: str) -> None:
        self.config = replace(self.config, webhook_url=self._coerce_optional_str(value))

    @property
    def data_dir(self) -> str:
        return self.config.data_dir

    @data_dir.setter
    def data_dir(self, value: str) -> None:
        self.config = replace(self.config, data_dir=self._coerce_dir(value))

    @property
    def debug_logging(self) -> bool:
        return self.config.debug_logging

    @debug_logging.setter
    def debug_logging(self, value: bool) -> None:
        self.config = replace(self.config, debug_logging=self._coerce_bool(value))

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted settings to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed = {f.name for f in fields(AppConfig)}
        unknown = set(payload.keys()) - allowed
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates = {key: self._coerce_config_value(key, value) for key, value in payload.items()}
        if updates:
            self.config = replace(self.config, **updates)

    def apply_env(self, environ: Optional[Mapping[str, str]] = None) -> None:
        """Apply ``FORGIVEME_*`` overrides; unset or empty variables are ignored."""
        env = os.environ if environ is None else environ
        updates: Dict[str, Any] = {}
        for var, key in ENV_OVERRIDES.items():
            raw = env.get(var)
            if raw is None or raw == "":
                continue
            updates[key] = self._coerce_config_value(key, raw)
        if updates:
            self.config = replace(self.config, **updates)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key == "admin_pin":
            return self._coerce_pin(raw)
        if key == "storage_key":
            return self._coerce_key(raw)
        if key == "data_dir":
            return self._coerce_dir(raw)
        if key in {"webhook_url", "celebration_note"}:
            return self._coerce_optional_str(raw)
        if key == "webhook_timeout_s":
            return self._coerce_int(key, raw, allow_negative=False)
        if key == "debug_logging":
            return self._coerce_bool(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_pin(value: Any) -> str:
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise ValueError("admin_pin must be a string.")
        return str(value)

    @staticmethod
    def _coerce_key(value: Any) -> str:
        key = value.strip() if isinstance(value, str) else value
        if not is_valid_storage_key(key):
            raise ValueError(
                "storage_key must start with a letter or digit and use only letters, digits, '.', '_' or '-'."
            )
        return key

    @staticmethod
    def _coerce_dir(value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("data_dir must be a string path.")
        return value.strip() or "."

    @staticmethod
    def _coerce_optional_str(value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)

    @staticmethod
    def _coerce_int(name: str, value: Any, *, allow_negative: bool = True) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        else:
            raise ValueError(f"{name} must be an integer.")
        if not allow_negative and coerced < 0:
            raise ValueError(f"{name} must be non-negative.")
        return coerced

