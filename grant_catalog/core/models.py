"""
Data models for the grant catalog.

Records are authored once and never mutated; per-evaluation fields
are carried on copies produced by GrantRecord.evaluated().
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Optional


class Currency(str, Enum):
    """Currency of the grant amount."""
    USD = "USD"
    JPY = "JPY"
    EUR = "EUR"


class GrantStatus(str, Enum):
    """Author-assigned application status."""
    ACTIVE = "active"  # Accepting applications
    UPCOMING = "upcoming"  # Announced, not yet open
    CLOSED = "closed"


def _serialize(value):
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, tuple):
        return list(value)
    return value


@dataclass(frozen=True)
class GrantDeadline:
    """When a grant accepts applications."""

    is_rolling: bool = False
    start: Optional[datetime] = None
    end: Optional[datetime] = None
    next_deadline: Optional[datetime] = None
    cycle: Optional[str] = None  # e.g. "daily", display only

    def to_dict(self) -> dict:
        data = {
            "isRolling": self.is_rolling,
            "start": self.start,
            "end": self.end,
            "nextDeadline": self.next_deadline,
            "cycle": self.cycle,
        }
        return {k: _serialize(v) for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class GrantRecord:
    """
    A single grant opportunity.

    `gated` marks a fixed-window record that is hidden once the
    reference time passes `deadline.end`. Rolling records are never gated.
    """

    # Identity
    title: str
    organization: str
    url: str

    # Money
    amount: str  # Display string, e.g. "¥500,000 - ¥2,000,000"
    minimum_amount: int
    maximum_amount: int
    currency: Currency

    deadline: GrantDeadline

    # Descriptive text
    description: str = ""
    eligibility: str = ""
    category: tuple[str, ...] = field(default_factory=tuple)
    upfront_payment: bool = False
    status: GrantStatus = GrantStatus.ACTIVE

    gated: bool = True

    # Stamped at evaluation time
    last_updated: Optional[datetime] = None

    def evaluated(
        self,
        last_updated: datetime,
        next_deadline: Optional[datetime] = None,
    ) -> "GrantRecord":
        """Return a copy carrying the per-evaluation timestamps."""
        deadline = self.deadline
        if next_deadline is not None:
            deadline = replace(deadline, next_deadline=next_deadline)
        return replace(self, deadline=deadline, last_updated=last_updated)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "title": self.title,
            "organization": self.organization,
            "url": self.url,
            "amount": self.amount,
            "minimumAmount": self.minimum_amount,
            "maximumAmount": self.maximum_amount,
            "currency": self.currency.value,
            "deadline": self.deadline.to_dict(),
            "description": self.description,
            "eligibility": self.eligibility,
            "category": list(self.category),
            "upfrontPayment": self.upfront_payment,
            "status": self.status.value,
            "lastUpdated": _serialize(self.last_updated),
        }
