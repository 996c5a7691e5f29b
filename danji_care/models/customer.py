"""Customer model: a managed or prospective apartment complex."""

from dataclasses import dataclass
from typing import ClassVar

from danji_care.models.enums import CustomerStatus


@dataclass
class Customer:
    """Apartment complex tracked by the planner."""

    ID_FIELD: ClassVar[str] = "customer_id"

    customer_id: str
    name: str  # joins to ApartmentGeoRecord.name
    manager: str  # 관리소장
    phone: str
    status: CustomerStatus = CustomerStatus.PROSPECT
    expiry_date: str = ""  # MM-DD, recurring yearly
    business_id: str = ""  # 사업자등록번호
    apartment_id: str | None = None
