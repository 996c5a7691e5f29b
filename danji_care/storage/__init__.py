"""Storage backends for the local data stores."""

from danji_care.storage.backends import JsonFileStorage, MemoryStorage, StorageBackend

__all__ = ["JsonFileStorage", "MemoryStorage", "StorageBackend"]
