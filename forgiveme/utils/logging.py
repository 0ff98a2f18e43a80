from __future__ import annotations

import logging
import os
from typing import Mapping, Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_VAR = "FORGIVEME_LOG_LEVEL"
DEBUG_VAR = "FORGIVEME_DEBUG"


def parse_level(value: Optional[str], fallback: int = logging.INFO) -> int:
    """Turn ``"debug"``, ``"WARNING"`` or ``"10"`` into a level number."""
    text = (value or "").strip()
    if not text:
        return fallback
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper())
    return candidate if isinstance(candidate, int) else fallback


def env_level(environ: Optional[Mapping[str, str]] = None) -> Optional[int]:
    """
    Level forced by the environment, or ``None`` when nothing is set.

    ``FORGIVEME_LOG_LEVEL`` wins over a truthy ``FORGIVEME_DEBUG``.
    """
    env = os.environ if environ is None else environ
    explicit = env.get(LEVEL_VAR)
    if explicit:
        return parse_level(explicit)
    if (env.get(DEBUG_VAR) or "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def configure_root(environ: Optional[Mapping[str, str]] = None) -> int:
    """Install the console handler once and return the effective root level."""
    effective = env_level(environ) or logging.INFO
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=effective, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(effective)
    return effective


def apply_gui_preferences(debug_enabled: bool, environ: Optional[Mapping[str, str]] = None) -> int:
    """Switch between INFO and DEBUG from settings unless the environment decided already."""
    forced = env_level(environ)
    level = forced if forced is not None else (logging.DEBUG if debug_enabled else logging.INFO)
    logging.getLogger().setLevel(level)
    return level


def env_forces_debug(environ: Optional[Mapping[str, str]] = None) -> bool:
    forced = env_level(environ)
    return forced is not None and forced <= logging.DEBUG
