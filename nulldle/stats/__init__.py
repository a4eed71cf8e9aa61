from .record import StatsRecord, FIELDS
from .backends import (
    KeyValueBackend, MemoryBackend, JsonFileBackend, SqlBackend, StorageUnavailable, open_backend,
)
from .store import StatsStore
from .recorder import StatsRecorder

__all__ = [
    "StatsRecord", "FIELDS", "KeyValueBackend", "MemoryBackend", "JsonFileBackend", "SqlBackend",
    "StorageUnavailable", "open_backend", "StatsStore", "StatsRecorder",
]
