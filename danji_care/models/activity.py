"""Memo and call-log entries attached to a customer."""

from dataclasses import dataclass
from typing import ClassVar

from danji_care.models.enums import ActivityType


@dataclass
class CustomerActivity:
    """Timestamped memo or call record."""

    ID_FIELD: ClassVar[str] = "activity_id"

    activity_id: str
    customer_id: str
    type: ActivityType
    content: str
    date: str  # ISO timestamp
