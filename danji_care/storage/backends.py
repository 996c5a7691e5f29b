"""Key-value storage backends for the local data stores."""

from abc import ABC, abstractmethod
from pathlib import Path

from danji_care.exceptions import StorageError


class StorageBackend(ABC):
    """Per-origin string key-value storage, one JSON blob per key."""

    @abstractmethod
    def get_item(self, key: str) -> str | None:
        """Return the stored value, or ``None`` when the key is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete ``key`` if present."""


class MemoryStorage(StorageBackend):
    """In-process storage for tests and throwaway sessions."""

    def __init__(self, quota_bytes: int | None = None) -> None:
        """Initialize memory storage.

        Parameters
        ----------
        quota_bytes : int | None
            Maximum total UTF-8 size of all stored values. Writes that would
            exceed it raise :class:`StorageError`. ``None`` means unlimited.
        """
        self.quota_bytes = quota_bytes
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            used = sum(
                len(v.encode("utf-8")) for k, v in self._items.items() if k != key
            )
            if used + len(value.encode("utf-8")) > self.quota_bytes:
                raise StorageError(f"Quota of {self.quota_bytes} bytes exceeded writing {key}")
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage(StorageBackend):
    """Store each key as ``<key>.json`` inside a directory."""

    def __init__(self, directory: str | Path) -> None:
        """Initialize file storage.

        Parameters
        ----------
        directory : str | Path
            Directory holding the JSON files. Created if missing.
        """
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        try:
            path.write_text(value, encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc

    def remove_item(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
