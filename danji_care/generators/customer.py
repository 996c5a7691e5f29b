"""Customer generator for demo portfolios."""

from __future__ import annotations

import random
from typing import Iterable, Iterator

from danji_care.generators.base import BaseGenerator
from danji_care.models import ApartmentGeoRecord, Customer, CustomerStatus
from danji_care.store.repositories import new_id


class CustomerGenerator(BaseGenerator):
    """Generate synthetic apartment-complex customers."""

    STATUSES = list(CustomerStatus)
    STATUS_WEIGHTS = [0.35, 0.25, 0.15, 0.25]

    DISTRICTS = ["대치", "도곡", "역삼", "개포", "삼성", "청담", "서초", "잠실"]
    BRANDS = ["자이", "래미안", "푸르지오", "아이파크", "힐스테이트", "롯데캐슬", "e편한세상"]

    def generate(self, record: ApartmentGeoRecord | None = None) -> Customer:
        """Generate a single customer.

        Parameters
        ----------
        record : ApartmentGeoRecord | None
            Directory entry to build the customer for. Its name, renewal
            date and registration number are reused and the two are joined
            by ``apartment_id``.

        Returns
        -------
        Customer
            Generated customer.
        """
        status = random.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0]
        return Customer(
            customer_id=new_id("cust"),
            name=record.name if record else self._apartment_name(),
            manager=f"{self.fake.last_name()}소장",
            phone=self.fake.phone_number(),
            status=status,
            expiry_date=record.renewal_date if record else self._expiry_date(),
            business_id=record.business_id if record else self.fake.bothify("###-##-#####"),
            apartment_id=record.apartment_id if record else None,
        )

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate ``count`` customers not tied to the directory."""
        for _ in range(count):
            yield self.generate()

    def generate_for_directory(self, records: Iterable[ApartmentGeoRecord]) -> Iterator[Customer]:
        """Generate one customer per directory entry."""
        for record in records:
            yield self.generate(record)

    def _apartment_name(self) -> str:
        return f"{random.choice(self.DISTRICTS)}{random.choice(self.BRANDS)}"

    def _expiry_date(self) -> str:
        return f"{random.randint(1, 12):02d}-{random.randint(1, 28):02d}"
