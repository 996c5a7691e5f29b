"""Demo customers shown until the planner saves their own list."""

from danji_care.models import Customer, CustomerStatus

_DEMO_ROWS = [
    ("1", "은마아파트", "김소장", "02-1234-5678", CustomerStatus.PROSPECT, "03-15"),
    ("2", "대치자이", "이소장", "02-2345-6789", CustomerStatus.ACTIVE, "04-28"),
    ("3", "래미안대치팰리스", "박소장", "02-3456-7890", CustomerStatus.PROPOSAL, "03-30"),
    ("4", "도곡렉슬", "최소장", "02-4567-8901", CustomerStatus.PROPOSAL, "04-05"),
    ("5", "도곡삼성래미안", "정소장", "02-5678-9012", CustomerStatus.NEGOTIATION, "05-10"),
    ("6", "개포우성", "강소장", "02-6789-0123", CustomerStatus.NEGOTIATION, "06-01"),
    ("7", "역삼래미안", "조소장", "02-7890-1234", CustomerStatus.NEGOTIATION, "05-20"),
    ("8", "역삼푸르지오", "윤소장", "02-8901-2345", CustomerStatus.ACTIVE, "07-15"),
    ("9", "테헤란한신", "장소장", "02-9012-3456", CustomerStatus.ACTIVE, "08-01"),
    ("10", "선릉삼성", "한소장", "02-0123-4567", CustomerStatus.ACTIVE, "08-20"),
]


def demo_customers() -> list[Customer]:
    """Return a fresh copy of the demo customer list."""
    return [
        Customer(
            customer_id=cid,
            name=name,
            manager=manager,
            phone=phone,
            status=status,
            expiry_date=expiry,
        )
        for cid, name, manager, phone, status, expiry in _DEMO_ROWS
    ]
