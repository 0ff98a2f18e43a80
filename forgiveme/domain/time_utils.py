from __future__ import annotations

"""Timestamp helpers for record creation and display."""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_epoch_ms(moment: datetime) -> int:
    """Milliseconds since the Unix epoch for an aware datetime."""
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def to_iso_utc(moment: datetime) -> str:
    """Render ``moment`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value: Any) -> Optional[datetime]:
    """Parse stored ISO timestamps into an aware datetime, ``None`` if unreadable."""
    if isinstance(value, datetime):
        parsed = value
    else:
        text = str(value or "").strip()
        if not text:
            return None
        normalized = text.replace(" ", "T")
        if normalized.endswith("Z"):
            normalized = normalized[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(normalized)
        except ValueError:
            return None

    if parsed.tzinfo is None or parsed.tzinfo.utcoffset(parsed) is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_local(value: Any, fmt: str = "%Y-%m-%d %H:%M:%S") -> str:
    """Format a stored timestamp in local time; unreadable input is echoed back."""
    parsed = parse_iso(value)
    if parsed is None:
        return str(value or "")
    return parsed.astimezone().strftime(fmt)


__all__ = ["format_local", "parse_iso", "to_epoch_ms", "to_iso_utc", "utc_now"]
