"""Planner-side claims desk."""

import logging
import math
from dataclasses import dataclass

from danji_care.exceptions import EntityNotFoundError, InvalidEntityStateError
from danji_care.geo.directory import GeoDirectory
from danji_care.models import Accident, AccidentStatus, RequestKind
from danji_care.reports import PLACEHOLDER, AccidentReport
from danji_care.store.repositories import AccidentRepository, CustomerRepository

logger = logging.getLogger(__name__)


@dataclass
class RequestPage:
    items: list[Accident]
    index: int
    total_pages: int


class ClaimsService:
    """Track client requests and confirm accident receipts."""

    def __init__(
        self,
        accidents: AccidentRepository,
        customers: CustomerRepository,
        directory: GeoDirectory,
        page_size: int = 5,
    ) -> None:
        self.accidents = accidents
        self.customers = customers
        self.directory = directory
        self.page_size = page_size

    def all(self) -> list[Accident]:
        return self.accidents.load()

    def get(self, accident_id: str) -> Accident:
        for accident in self.accidents.load():
            if accident.accident_id == accident_id:
                return accident
        raise EntityNotFoundError(f"Accident {accident_id} not found")

    def accident_requests(self, search: str = "") -> list[Accident]:
        """Accident reports only, optionally filtered by apartment name."""
        requests = [a for a in self.accidents.load() if a.kind == RequestKind.ACCIDENT]
        query = search.strip().lower()
        if not query:
            return requests
        return [a for a in requests if query in a.apartment_name.lower()]

    def status_counts(self) -> dict[AccidentStatus, int]:
        counts = {status: 0 for status in AccidentStatus}
        for accident in self.accidents.load():
            counts[accident.status] += 1
        return counts

    def pending_accident_count(self) -> int:
        return sum(
            1 for a in self.accidents.load()
            if a.status == AccidentStatus.PENDING and a.kind == RequestKind.ACCIDENT
        )

    def update_status(self, accident_id: str, status: AccidentStatus) -> Accident:
        updated = self.accidents.update_status(accident_id, AccidentStatus(status))
        if updated is None:
            raise EntityNotFoundError(f"Accident {accident_id} not found")
        return updated

    def confirm_receipt(self, accident_id: str) -> Accident:
        """Move a pending request to completed.

        Raises
        ------
        InvalidEntityStateError
            If the request is not pending.
        """
        accident = self.get(accident_id)
        if accident.status != AccidentStatus.PENDING:
            raise InvalidEntityStateError(
                f"Accident {accident_id} is {accident.status.value}, not Pending"
            )
        logger.info("Confirmed receipt of %s", accident_id)
        return self.update_status(accident_id, AccidentStatus.COMPLETED)

    def business_id_for(self, apartment_name: str) -> str:
        """Customer's registration number, else the directory's, else ``-``."""
        customer = self.customers.find_by_name(apartment_name)
        if customer and customer.business_id.strip():
            return customer.business_id.strip()
        record = None
        if customer and customer.apartment_id:
            record = self.directory.get(customer.apartment_id)
        record = record or self.directory.find_by_name(apartment_name)
        return record.business_id if record else PLACEHOLDER

    def page(self, index: int) -> RequestPage:
        """One page of all requests; out-of-range indexes clamp to the last page."""
        accidents = self.accidents.load()
        total_pages = max(1, math.ceil(len(accidents) / self.page_size))
        index = min(max(index, 0), total_pages - 1)
        start = index * self.page_size
        return RequestPage(accidents[start:start + self.page_size], index, total_pages)

    def build_report(self, accident_id: str) -> AccidentReport:
        accident = self.get(accident_id)
        return AccidentReport(
            apartment_name=accident.apartment_name,
            accident_date=accident.date,
            description=accident.content,
            business_id=self.business_id_for(accident.apartment_name),
            location=accident.apartment_name,
            photo_urls=accident.stored_photos,
        )
