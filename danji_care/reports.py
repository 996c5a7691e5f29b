"""Printable accident receipt (사고 접수 확인서)."""

import logging
from dataclasses import dataclass, field
from datetime import datetime

logger = logging.getLogger(__name__)

PLACEHOLDER = "-"


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO timestamp, accepting the ``Z`` suffix.

    Timestamps carrying an offset are shown in local time; naive ones keep
    their own wall clock.
    """
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is not None:
        dt = dt.astimezone()
    return dt


def format_accident_datetime(value: str) -> tuple[str, str] | None:
    """Format as ``("2024년 1월 15일", "오후 3시 5분경")``; ``None`` if empty or unparseable."""
    if not value:
        return None
    try:
        dt = parse_timestamp(value)
    except ValueError:
        logger.warning("Unparseable accident date %r", value)
        return None
    hour = dt.hour
    meridiem = "오전" if hour < 12 else "오후"
    display_hour = 12 if hour == 0 else hour - 12 if hour > 12 else hour
    return (
        f"{dt.year}년 {dt.month}월 {dt.day}일",
        f"{meridiem} {display_hour}시 {dt.minute}분경",
    )


@dataclass
class AccidentReport:
    apartment_name: str
    accident_date: str
    description: str
    business_id: str = PLACEHOLDER
    location: str = PLACEHOLDER
    photo_urls: list[str] = field(default_factory=list)

    def render_text(self) -> str:
        """Plain-text rendition of the receipt for printing or faxing."""
        formatted = format_accident_datetime(self.accident_date)
        when = " ".join(formatted) if formatted else PLACEHOLDER
        lines = [
            "사고 접수 확인서",
            "",
            "[단지 정보]",
            f"아파트명: {self.apartment_name}",
            f"사업자등록번호: {self.business_id or PLACEHOLDER}",
            "",
            "[사고 정보]",
            f"사고일시: {when}",
            f"사고장소: {self.location or PLACEHOLDER}",
            f"사고내용: {self.description}",
            "",
            f"[현장 사진] {len(self.photo_urls)}장",
        ]
        return "\n".join(lines)
