"""Domain package exports for value objects and the response log."""

from .entities import Answer, ResponseRecord, Screen
from .ports import KeyValueStorePort, NotifierPort, UseCaseError
from .response_log import DEFAULT_STORAGE_KEY, ResponseLog

__all__ = [
    "Answer",
    "DEFAULT_STORAGE_KEY",
    "KeyValueStorePort",
    "NotifierPort",
    "ResponseLog",
    "ResponseRecord",
    "Screen",
    "UseCaseError",
]
