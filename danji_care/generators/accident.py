"""Accident and request generator for demo claims."""

from __future__ import annotations

import random
from typing import Iterator

from danji_care.generators.base import BaseGenerator
from danji_care.models import Accident, AccidentStatus, RequestKind
from danji_care.models.enums import CONTACT_PREFIX, ESTIMATE_PREFIX
from danji_care.services.intake import INSURANCE_PRODUCTS
from danji_care.store.repositories import new_id


class AccidentGenerator(BaseGenerator):
    """Generate client requests of every kind."""

    KINDS = list(RequestKind)
    KIND_WEIGHTS = [0.70, 0.20, 0.10]

    STATUSES = [AccidentStatus.PENDING, AccidentStatus.COMPLETED]
    STATUS_WEIGHTS = [0.6, 0.4]

    ACCIDENT_TEMPLATES = [
        "{floor}층 세대 누수로 아래층 천장 피해",
        "지하주차장 차량 화재 경보 발생",
        "놀이터 미끄럼틀 파손으로 어린이 경상",
        "{floor}층 승강기 문 끼임 사고",
        "외벽 타일 낙하로 주차 차량 파손",
    ]

    def generate(self, apartment_name: str) -> Accident:
        """Generate a single request for ``apartment_name``."""
        kind = random.choices(self.KINDS, weights=self.KIND_WEIGHTS, k=1)[0]
        when = self.fake.date_time_between(start_date="-90d", end_date="now")
        return Accident(
            accident_id=new_id("acc"),
            apartment_name=apartment_name,
            date=when.isoformat(timespec="seconds"),
            content=self._content(kind),
            status=random.choices(self.STATUSES, weights=self.STATUS_WEIGHTS, k=1)[0],
            photos=[],
            kind=kind,
        )

    def generate_batch(self, apartment_names: list[str], count: int) -> Iterator[Accident]:
        """Generate ``count`` requests spread over ``apartment_names``."""
        for _ in range(count):
            yield self.generate(random.choice(apartment_names))

    def _content(self, kind: RequestKind) -> str:
        if kind == RequestKind.ESTIMATE:
            label = random.choice(list(INSURANCE_PRODUCTS.values()))
            return f"{ESTIMATE_PREFIX} - {label} (만기 {random.randint(1, 12)}/{random.randint(1, 28)})"
        if kind == RequestKind.CONTACT:
            return CONTACT_PREFIX
        template = random.choice(self.ACCIDENT_TEMPLATES)
        return template.format(floor=random.randint(1, 25))
