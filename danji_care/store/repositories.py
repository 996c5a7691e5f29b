"""Repositories over the key-value storage backend.

Each repository owns one storage key holding a JSON array. Loads are
all-or-nothing: a missing key, unparsable JSON, a non-array value or any
record that fails to decode yields the repository default. Saves rewrite
the whole array and never raise; failures are logged and the caller's
in-memory list stays the only copy until the next successful write.
"""

import json
import logging
import time
import uuid
from typing import Callable, Generic, TypeVar

from danji_care.exceptions import StorageError
from danji_care.models import (
    Accident,
    AccidentStatus,
    ActivityType,
    Customer,
    CustomerActivity,
    ScheduleEvent,
)
from danji_care.storage.backends import StorageBackend
from danji_care.storage.serialization import (
    accident_from_record,
    activity_from_record,
    customer_from_record,
    schedule_event_from_record,
    to_record,
)
from danji_care.store.demo import demo_customers

logger = logging.getLogger(__name__)

T = TypeVar("T")

CUSTOMERS_KEY = "woori-customers"
ACCIDENTS_KEY = "woori-accidents"
SCHEDULE_EVENTS_KEY = "woori-schedule-events"
ACTIVITIES_KEY = "woori-customer-activities"


def new_id(prefix: str) -> str:
    """Generate a record id such as ``acc-1718000000000-3f9a2c1``."""
    return f"{prefix}-{int(time.time() * 1000)}-{uuid.uuid4().hex[:7]}"


class JsonListRepository(Generic[T]):
    """Load/save a list of records stored under a single key."""

    key: str = ""

    def __init__(self, storage: StorageBackend) -> None:
        self.storage = storage

    def default(self) -> list[T]:
        return []

    def decode(self, data: dict) -> T:
        raise NotImplementedError

    def encode(self, item: T) -> dict:
        return to_record(item)

    def load(self) -> list[T]:
        """Read the full list, falling back to the default on any defect."""
        try:
            raw = self.storage.get_item(self.key)
        except StorageError as exc:
            logger.warning("Reading %s failed, using defaults: %s", self.key, exc)
            return self.default()
        if not raw:
            return self.default()
        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Discarding unparsable %s blob", self.key)
            return self.default()
        if not isinstance(parsed, list):
            logger.warning("Discarding %s: expected an array, got %s", self.key, type(parsed).__name__)
            return self.default()
        try:
            return [self.decode(item) for item in parsed]
        except (KeyError, ValueError, TypeError, AttributeError) as exc:
            logger.warning("Discarding %s: malformed record (%s)", self.key, exc)
            return self.default()

    def save(self, items: list[T]) -> None:
        """Write the full list; failures are logged and ignored."""
        try:
            payload = json.dumps([self.encode(item) for item in items], ensure_ascii=False)
            self.storage.set_item(self.key, payload)
        except (StorageError, OSError, TypeError, ValueError) as exc:
            logger.warning("Saving %s failed (%d records): %s", self.key, len(items), exc)


class CustomerRepository(JsonListRepository[Customer]):
    """Customer list; shows the demo customers until first saved."""

    key = CUSTOMERS_KEY

    def default(self) -> list[Customer]:
        return demo_customers()

    def decode(self, data: dict) -> Customer:
        return customer_from_record(data)

    def find(self, customer_id: str) -> Customer | None:
        return next((c for c in self.load() if c.customer_id == customer_id), None)

    def find_by_name(self, name: str) -> Customer | None:
        return next((c for c in self.load() if c.name == name), None)


class AccidentRepository(JsonListRepository[Accident]):
    """Client requests, newest first."""

    key = ACCIDENTS_KEY

    def decode(self, data: dict) -> Accident:
        return accident_from_record(data)

    def encode(self, item: Accident) -> dict:
        record = to_record(item)
        record["photos"] = item.stored_photos
        return record

    def add(self, accident: Accident) -> Accident:
        accidents = self.load()
        accidents.insert(0, accident)
        self.save(accidents)
        return accident

    def update_status(self, accident_id: str, status: AccidentStatus) -> Accident | None:
        """Set the status of one record; returns it, or ``None`` if unknown."""
        accidents = self.load()
        updated = None
        for accident in accidents:
            if accident.accident_id == accident_id:
                accident.status = status
                updated = accident
        if updated is not None:
            self.save(accidents)
        return updated


class ScheduleEventRepository(JsonListRepository[ScheduleEvent]):
    key = SCHEDULE_EVENTS_KEY

    def decode(self, data: dict) -> ScheduleEvent:
        return schedule_event_from_record(data)


class ActivityRepository(JsonListRepository[CustomerActivity]):
    """Memo/call log shared by all customers."""

    key = ACTIVITIES_KEY

    def __init__(
        self,
        storage: StorageBackend,
        clock: Callable[[], str] | None = None,
    ) -> None:
        super().__init__(storage)
        self._clock = clock or _utc_now_iso

    def decode(self, data: dict) -> CustomerActivity:
        return activity_from_record(data)

    def for_customer(self, customer_id: str) -> list[CustomerActivity]:
        """Activities of one customer, newest first."""
        activities = [a for a in self.load() if a.customer_id == customer_id]
        return sorted(activities, key=lambda a: a.date, reverse=True)

    def add(self, customer_id: str, activity_type: ActivityType, content: str) -> CustomerActivity:
        activity = CustomerActivity(
            activity_id=new_id("act"),
            customer_id=customer_id,
            type=ActivityType(activity_type),
            content=content.strip(),
            date=self._clock(),
        )
        activities = self.load()
        activities.insert(0, activity)
        self.save(activities)
        return activity

    def delete(self, activity_id: str) -> None:
        self.save([a for a in self.load() if a.activity_id != activity_id])


def _utc_now_iso() -> str:
    from datetime import datetime, timezone

    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
