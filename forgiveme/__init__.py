"""Forgive Me? response kiosk: a yes/no prompt with a locally persisted response log."""

__version__ = "0.1.0"
