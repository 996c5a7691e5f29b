"""Accident (claim/request) model."""

from dataclasses import dataclass, field
from typing import Any, ClassVar

from danji_care.models.enums import AccidentStatus, RequestKind


@dataclass
class Accident:
    """Client-submitted request tracked through a three-state lifecycle.

    ``photos`` holds data-URL strings once persisted. Before submission it
    may also hold in-memory file handles; those are never written to storage.
    """

    ID_FIELD: ClassVar[str] = "accident_id"

    accident_id: str
    apartment_name: str
    date: str  # ISO timestamp
    content: str
    status: AccidentStatus = AccidentStatus.PENDING
    photos: list[Any] = field(default_factory=list)
    kind: RequestKind = RequestKind.ACCIDENT

    @property
    def stored_photos(self) -> list[str]:
        """Photo references that survive persistence."""
        return [p for p in self.photos if isinstance(p, str)]
