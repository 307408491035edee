"""
Core layer - stable foundation for the grant catalog.

Components:
- models: GrantRecord, GrantDeadline dataclasses and enums
- clock: Timezone-aware "now" and reference time parsing
- formatting: ja-JP date, amount, deadline and status rendering
"""

from .models import GrantRecord, GrantDeadline, GrantStatus, Currency
from .clock import (
    DEFAULT_TIMEZONE,
    now_in_zone,
    resolve_zone,
    parse_reference_time,
)
from .formatting import (
    format_amount,
    format_date,
    format_timestamp,
    format_deadline,
    format_status,
    format_upfront,
    render_grant,
)

__all__ = [
    "GrantRecord",
    "GrantDeadline",
    "GrantStatus",
    "Currency",
    "DEFAULT_TIMEZONE",
    "now_in_zone",
    "resolve_zone",
    "parse_reference_time",
    "format_amount",
    "format_date",
    "format_timestamp",
    "format_deadline",
    "format_status",
    "format_upfront",
    "render_grant",
]
