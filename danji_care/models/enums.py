"""Enumeration types for danji-care entities."""

from enum import Enum

ESTIMATE_PREFIX = "보험 견적 접수"
CONTACT_PREFIX = "담당자 연락 요청"


class CustomerStatus(str, Enum):
    PROSPECT = "prospect"
    PROPOSAL = "proposal"
    NEGOTIATION = "negotiation"
    ACTIVE = "active"

    @property
    def label(self) -> str:
        return STATUS_LABEL[self]


STATUS_ORDER: list[CustomerStatus] = [
    CustomerStatus.PROSPECT,
    CustomerStatus.PROPOSAL,
    CustomerStatus.NEGOTIATION,
    CustomerStatus.ACTIVE,
]

STATUS_LABEL: dict[CustomerStatus, str] = {
    CustomerStatus.PROSPECT: "방문",
    CustomerStatus.PROPOSAL: "견적 제안",
    CustomerStatus.NEGOTIATION: "제출",
    CustomerStatus.ACTIVE: "계약 중",
}


class AccidentStatus(str, Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    COMPLETED = "Completed"

    @property
    def label(self) -> str:
        return ACCIDENT_STATUS_LABEL[self]


ACCIDENT_STATUS_LABEL: dict[AccidentStatus, str] = {
    AccidentStatus.PENDING: "접수대기",
    AccidentStatus.COMPLETED: "접수완료",
    AccidentStatus.PROCESSING: "처리중",
}


class RequestKind(str, Enum):
    """Subtype of a client request stored as an accident record."""

    ACCIDENT = "accident"
    ESTIMATE = "estimate"
    CONTACT = "contact"

    @classmethod
    def infer(cls, content: str) -> "RequestKind":
        """Derive the kind of a legacy record from its content prefix.

        Records written before the kind was stored carry the subtype only
        as a literal prefix on the content.
        """
        if content.startswith(ESTIMATE_PREFIX):
            return cls.ESTIMATE
        if content.startswith(CONTACT_PREFIX):
            return cls.CONTACT
        return cls.ACCIDENT


class ActivityType(str, Enum):
    MEMO = "memo"
    CALL = "call"

    @property
    def label(self) -> str:
        return "메모" if self is ActivityType.MEMO else "통화"


class ScheduleEventColor(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    PURPLE = "purple"
    GRAY = "gray"


class PinColor(str, Enum):
    RED = "red"
    YELLOW = "yellow"
    GRAY = "gray"
    GREEN = "green"


class Weather(str, Enum):
    CLEAR = "맑음"
    RAIN = "비"
    CLOUDY = "흐림"
