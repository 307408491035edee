"""Tests for core models."""

import dataclasses

import pytest
from datetime import datetime, timezone

from grant_catalog.core.models import (
    Currency,
    GrantDeadline,
    GrantRecord,
    GrantStatus,
)


def make_record(**overrides) -> GrantRecord:
    data = dict(
        title="Test Grant",
        organization="Test Org",
        url="https://example.com",
        amount="$1,000",
        minimum_amount=1000,
        maximum_amount=1000,
        currency=Currency.USD,
        deadline=GrantDeadline(is_rolling=True, cycle="daily"),
    )
    data.update(overrides)
    return GrantRecord(**data)


class TestEnums:
    """Tests for closed enumerations."""

    def test_currency_values(self):
        """Test the three supported currencies."""
        assert [c.value for c in Currency] == ["USD", "JPY", "EUR"]

    def test_status_values(self):
        """Test status variants compare equal to their strings."""
        assert GrantStatus.ACTIVE == "active"
        assert GrantStatus("upcoming") is GrantStatus.UPCOMING
        assert GrantStatus.CLOSED.value == "closed"


class TestGrantDeadline:
    """Tests for GrantDeadline dataclass."""

    def test_defaults(self):
        """Test a bare deadline is non-rolling with no dates."""
        deadline = GrantDeadline()
        assert deadline.is_rolling is False
        assert deadline.start is None
        assert deadline.end is None
        assert deadline.next_deadline is None

    def test_to_dict_excludes_none(self):
        """Test that to_dict omits unset dates."""
        result = GrantDeadline(is_rolling=True, cycle="daily").to_dict()

        assert result == {"isRolling": True, "cycle": "daily"}

    def test_to_dict_datetime_serialization(self):
        """Test that datetimes are serialized to ISO format."""
        end = datetime(2025, 1, 15, tzinfo=timezone.utc)
        result = GrantDeadline(end=end).to_dict()

        assert result["end"] == "2025-01-15T00:00:00+00:00"

    def test_to_dict_camel_case_keys(self):
        """Test keys match the camelCase record document."""
        end = datetime(2025, 1, 15, tzinfo=timezone.utc)
        result = GrantDeadline(start=end, end=end, next_deadline=end).to_dict()

        assert set(result) == {"isRolling", "start", "end", "nextDeadline"}
        assert result["isRolling"] is False
        assert result["nextDeadline"] == "2025-01-15T00:00:00+00:00"


class TestGrantRecord:
    """Tests for GrantRecord dataclass."""

    def test_minimal_record(self):
        """Test record with minimal required fields."""
        record = make_record()

        assert record.status == GrantStatus.ACTIVE
        assert record.category == ()
        assert record.gated is True
        assert record.last_updated is None

    def test_record_is_immutable(self):
        """Test that authored records cannot be mutated."""
        record = make_record()

        with pytest.raises(dataclasses.FrozenInstanceError):
            record.title = "Changed"

    def test_evaluated_returns_copy(self):
        """Test evaluated() stamps a copy and leaves the original alone."""
        record = make_record()
        stamp = datetime(2024, 6, 1, tzinfo=timezone.utc)
        next_deadline = datetime(2024, 6, 2, tzinfo=timezone.utc)

        result = record.evaluated(last_updated=stamp, next_deadline=next_deadline)

        assert result is not record
        assert result.last_updated == stamp
        assert result.deadline.next_deadline == next_deadline
        assert result.deadline.cycle == "daily"
        assert record.last_updated is None
        assert record.deadline.next_deadline is None

    def test_evaluated_keeps_authored_next_deadline(self):
        """Test evaluated() without next_deadline keeps the authored one."""
        end = datetime(2025, 1, 15, tzinfo=timezone.utc)
        record = make_record(deadline=GrantDeadline(end=end, next_deadline=end))

        result = record.evaluated(last_updated=datetime.now(timezone.utc))

        assert result.deadline.next_deadline == end

    def test_to_dict(self):
        """Test JSON-ready dictionary conversion."""
        record = make_record(
            currency=Currency.JPY,
            amount="¥500,000",
            category=("Arts", "Culture"),
            status=GrantStatus.UPCOMING,
            last_updated=datetime(2024, 6, 1, tzinfo=timezone.utc),
        )

        result = record.to_dict()

        assert result["currency"] == "JPY"
        assert result["status"] == "upcoming"
        assert result["category"] == ["Arts", "Culture"]
        assert result["lastUpdated"] == "2024-06-01T00:00:00+00:00"
        assert result["deadline"]["isRolling"] is True
        assert "gated" not in result
