"""
Authored grant table and deadline-window evaluation.

The catalog is a fixed, ordered list of GrantRecord definitions.
Evaluation filters it against a reference time and stamps the
per-run fields; nothing is cached between calls.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional, Sequence

import structlog

from .core.clock import DEFAULT_TIMEZONE, resolve_zone
from .core.models import Currency, GrantDeadline, GrantRecord, GrantStatus
from .core import formatting

logger = structlog.get_logger(__name__)

ROLLING_INTERVAL = timedelta(hours=24)


def _utc_date(year: int, month: int, day: int) -> datetime:
    return datetime(year, month, day, tzinfo=timezone.utc)


DEFAULT_GRANTS: tuple[GrantRecord, ...] = (
    GrantRecord(
        title="Pollination Project Daily Grant",
        organization="The Pollination Project",
        url="https://thepollinationproject.org",
        amount="$1,000",
        minimum_amount=1000,
        maximum_amount=1000,
        currency=Currency.USD,
        deadline=GrantDeadline(is_rolling=True, cycle="daily"),
        description=(
            "社会変革を目指す個人に対する日次の助成金。"
            "環境、教育、社会正義などの分野で活動する個人を支援。"
        ),
        eligibility="世界中の個人が対象（団体も可）",
        category=("Social Change", "Community", "Environment", "Education"),
        upfront_payment=True,
        status=GrantStatus.ACTIVE,
    ),
    GrantRecord(
        title="Japan Foundation アートプラットフォーム助成",
        organization="Japan Foundation",
        url="https://www.jpf.go.jp",
        amount="¥1,000,000 - ¥5,000,000",
        minimum_amount=1_000_000,
        maximum_amount=5_000_000,
        currency=Currency.JPY,
        deadline=GrantDeadline(
            start=_utc_date(2024, 12, 1),
            end=_utc_date(2025, 1, 15),
            next_deadline=_utc_date(2025, 1, 15),
        ),
        description="日本と海外のアーティスト・文化団体による共同プロジェクトの支援。",
        eligibility="アーティスト、文化団体（国際協力が必須）",
        category=("Arts", "Culture", "International"),
        upfront_payment=True,
        status=GrantStatus.UPCOMING,
    ),
    GrantRecord(
        title="SARAI プロジェクト助成金",
        organization="Sustainable Agriculture Research Program",
        url="https://sarai.example.com",
        amount="¥500,000 - ¥2,000,000",
        minimum_amount=500_000,
        maximum_amount=2_000_000,
        currency=Currency.JPY,
        deadline=GrantDeadline(
            start=_utc_date(2024, 1, 15),
            end=_utc_date(2024, 2, 28),
            next_deadline=_utc_date(2024, 2, 28),
        ),
        description=(
            "持続可能な農業プロジェクト、"
            "特にアクアポニクスや都市農業の革新的なアプローチを支援"
        ),
        eligibility="個人、団体（営利・非営利問わず）",
        category=("Agriculture", "Sustainability", "Innovation", "Education"),
        upfront_payment=True,
        status=GrantStatus.UPCOMING,
        # Listed regardless of its window
        gated=False,
    ),
)


def validate_record(record: GrantRecord) -> None:
    """
    Check an authored record.

    Raises:
        ValueError: If a rolling record carries a window, or a gated
            fixed-window record has no end date
    """
    deadline = record.deadline
    if deadline.is_rolling:
        if deadline.start is not None or deadline.end is not None:
            raise ValueError(
                f"Rolling grant must not define start/end: {record.title}"
            )
    elif record.gated and deadline.end is None:
        raise ValueError(f"Gated grant has no end date: {record.title}")


def is_visible(record: GrantRecord, reference_time: datetime) -> bool:
    """
    Whether a record is listed at `reference_time`.

    Only the end of the window is checked; a grant is listed before
    its start date.
    """
    if record.deadline.is_rolling or not record.gated:
        return True
    return reference_time <= record.deadline.end


class GrantCatalog:
    """
    Fixed catalog of grant opportunities.

    Usage:
        catalog = GrantCatalog()
        grants = catalog.evaluate(now_in_zone("Asia/Tokyo"))
    """

    def __init__(self, records: Sequence[GrantRecord] = DEFAULT_GRANTS):
        """
        Initialize catalog.

        Args:
            records: Authored records in display order

        Raises:
            ValueError: If any record is malformed
        """
        for record in records:
            validate_record(record)
        self.records: tuple[GrantRecord, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self.records)

    def evaluate(
        self,
        reference_time: datetime,
        now: Optional[datetime] = None,
    ) -> list[GrantRecord]:
        """
        Return the records visible at `reference_time`.

        Args:
            reference_time: Timestamp used for deadline comparisons;
                naive values are read as DEFAULT_TIMEZONE local time
            now: Stamp for `last_updated` (defaults to current UTC time)

        Returns:
            Evaluated copies, in authoring order
        """
        if reference_time.tzinfo is None:
            reference_time = reference_time.replace(
                tzinfo=resolve_zone(DEFAULT_TIMEZONE)
            )
        stamp = now or datetime.now(timezone.utc)

        grants = []
        for record in self.records:
            if not is_visible(record, reference_time):
                logger.debug("grant_hidden", title=record.title)
                continue

            next_deadline = None
            if record.deadline.is_rolling:
                next_deadline = reference_time + ROLLING_INTERVAL

            grants.append(
                record.evaluated(last_updated=stamp, next_deadline=next_deadline)
            )

        logger.info(
            "catalog_evaluated",
            reference_time=reference_time.isoformat(),
            total=len(self.records),
            visible=len(grants),
        )
        return grants

    def format_deadline(self, deadline: GrantDeadline) -> str:
        """Human-readable deadline text."""
        return formatting.format_deadline(deadline)

    def format_amount(self, amount: str, currency) -> str:
        return formatting.format_amount(amount, currency)
