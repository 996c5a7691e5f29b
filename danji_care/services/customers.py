"""Customer list, sales pipeline and customer detail."""

import logging
from dataclasses import dataclass, field, replace

from danji_care.exceptions import EntityNotFoundError, ValidationError
from danji_care.models import (
    STATUS_ORDER,
    Accident,
    ActivityType,
    Customer,
    CustomerActivity,
    CustomerStatus,
)
from danji_care.renewal import parse_month_day
from danji_care.store.repositories import (
    AccidentRepository,
    ActivityRepository,
    CustomerRepository,
    new_id,
)

logger = logging.getLogger(__name__)


@dataclass
class PipelineMatches:
    ids: set[str] = field(default_factory=set)
    first_id: str | None = None


class CustomerService:
    """Operations behind the customer list, pipeline board and detail page.

    Pipeline moves are deliberately unguarded: any stage can be dragged to
    any other, including back out of ``active``.
    """

    def __init__(
        self,
        customers: CustomerRepository,
        activities: ActivityRepository,
        accidents: AccidentRepository,
    ) -> None:
        self.customers = customers
        self.activities = activities
        self.accidents = accidents

    def list_customers(self) -> list[Customer]:
        return self.customers.load()

    def get(self, customer_id: str) -> Customer:
        customer = self.customers.find(customer_id)
        if customer is None:
            raise EntityNotFoundError(f"Customer {customer_id} not found")
        return customer

    def search(self, query: str) -> list[Customer]:
        """Customers whose name or manager contains ``query``."""
        customers = self.customers.load()
        q = query.strip().lower()
        if not q:
            return customers
        return [c for c in customers if q in c.name.lower() or q in c.manager.lower()]

    def register(
        self,
        name: str,
        manager: str = "",
        phone: str = "",
        status: CustomerStatus = CustomerStatus.PROSPECT,
        expiry_date: str = "",
        business_id: str = "",
        apartment_id: str | None = None,
    ) -> Customer:
        """Add a customer at the top of the list."""
        name = name.strip()
        if not name:
            raise ValidationError("Customer name is required")
        if expiry_date:
            parse_month_day(expiry_date)
        customer = Customer(
            customer_id=new_id("cust"),
            name=name,
            manager=manager,
            phone=phone,
            status=CustomerStatus(status),
            expiry_date=expiry_date,
            business_id=business_id.strip(),
            apartment_id=apartment_id,
        )
        customers = self.customers.load()
        customers.insert(0, customer)
        self.customers.save(customers)
        logger.info("Registered customer %s (%s)", customer.customer_id, customer.name)
        return customer

    def update(self, customer: Customer) -> Customer:
        """Replace the stored row with the edited customer."""
        name = customer.name.strip()
        if not name:
            raise ValidationError("Customer name is required")
        if customer.expiry_date:
            parse_month_day(customer.expiry_date)
        edited = replace(customer, name=name, business_id=customer.business_id.strip())
        customers = self.customers.load()
        for i, existing in enumerate(customers):
            if existing.customer_id == edited.customer_id:
                customers[i] = edited
                self.customers.save(customers)
                return edited
        raise EntityNotFoundError(f"Customer {customer.customer_id} not found")

    def move_customer(self, customer_id: str, status: CustomerStatus) -> Customer:
        """Drop a customer into another pipeline column."""
        customer = self.get(customer_id)
        moved = self.update(replace(customer, status=CustomerStatus(status)))
        logger.info("Moved %s from %s to %s", customer_id, customer.status.value, moved.status.value)
        return moved

    def pipeline_buckets(self) -> dict[CustomerStatus, list[Customer]]:
        buckets: dict[CustomerStatus, list[Customer]] = {s: [] for s in STATUS_ORDER}
        for customer in self.customers.load():
            buckets[customer.status].append(customer)
        return buckets

    def pipeline_matches(self, query: str) -> PipelineMatches:
        """Highlight targets for the pipeline board's name search."""
        q = query.strip().lower()
        if not q:
            return PipelineMatches()
        matches = [c.customer_id for c in self.customers.load() if q in c.name.lower()]
        return PipelineMatches(ids=set(matches), first_id=matches[0] if matches else None)

    def customer_accidents(self, customer_id: str) -> list[Accident]:
        customer = self.get(customer_id)
        return [a for a in self.accidents.load() if a.apartment_name == customer.name]

    def activities_for(self, customer_id: str) -> list[CustomerActivity]:
        return self.activities.for_customer(customer_id)

    def add_activity(self, customer_id: str, activity_type: ActivityType, content: str) -> CustomerActivity:
        if not content.strip():
            raise ValidationError("Activity content is required")
        return self.activities.add(customer_id, activity_type, content)

    def delete_activity(self, activity_id: str) -> None:
        self.activities.delete(activity_id)
