"""Record <-> JSON conversion for the local data stores.

Stored records use the camelCase keys of the browser application
(``expiryDate``, ``apartmentName`` ...) and keep each entity's own id
under ``id``, so existing blobs load unchanged.
"""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from danji_care.models import (
    Accident,
    AccidentStatus,
    ActivityType,
    Customer,
    CustomerActivity,
    CustomerStatus,
    RequestKind,
    ScheduleEvent,
    ScheduleEventColor,
)


def to_camel(name: str) -> str:
    """Convert ``snake_case`` to ``camelCase``."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_record(obj: Any) -> dict:
    """Convert a model dataclass to its stored dict form."""
    if not is_dataclass(obj):
        raise TypeError(f"Cannot serialize {type(obj).__name__}")
    id_field = getattr(obj, "ID_FIELD", None)
    record = {}
    for f in fields(obj):
        key = "id" if f.name == id_field else to_camel(f.name)
        record[key] = serialize_value(getattr(obj, f.name))
    return record


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


# Decoders raise KeyError/ValueError/TypeError on malformed records; the
# repositories treat any such error as a corrupt blob.


def customer_from_record(data: dict) -> Customer:
    return Customer(
        customer_id=str(data["id"]),
        name=data["name"],
        manager=data.get("manager", ""),
        phone=data.get("phone", ""),
        status=CustomerStatus(data.get("status", CustomerStatus.PROSPECT.value)),
        expiry_date=data.get("expiryDate") or "",
        business_id=data.get("businessId") or "",
        apartment_id=data.get("apartmentId"),
    )


def accident_from_record(data: dict) -> Accident:
    content = data["content"]
    kind = data.get("kind")
    return Accident(
        accident_id=str(data["id"]),
        apartment_name=data["apartmentName"],
        date=data["date"],
        content=content,
        status=AccidentStatus(data.get("status", AccidentStatus.PENDING.value)),
        photos=[p for p in data.get("photos", []) if isinstance(p, str)],
        kind=RequestKind(kind) if kind else RequestKind.infer(content),
    )


def schedule_event_from_record(data: dict) -> ScheduleEvent:
    color = data.get("color")
    return ScheduleEvent(
        event_id=str(data["id"]),
        date=data["date"],
        title=data["title"],
        color=ScheduleEventColor(color) if color else ScheduleEventColor.GRAY,
    )


def activity_from_record(data: dict) -> CustomerActivity:
    return CustomerActivity(
        activity_id=str(data["id"]),
        customer_id=str(data["customerId"]),
        type=ActivityType(data["type"]),
        content=data["content"],
        date=data["date"],
    )
