"""
ja-JP presentation helpers.

Every function here is total: any well-typed input produces a string.
"""

from datetime import datetime

from .models import Currency, GrantDeadline, GrantRecord, GrantStatus

ASCII_YEN = "¥"
FULLWIDTH_YEN = "￥"

ROLLING_LABEL = "常時募集中"
FALLBACK_LABEL = "募集期間は公式サイトでご確認ください"


def format_amount(amount: str, currency) -> str:
    """Use the full-width yen sign for JPY amounts."""
    if currency == Currency.JPY:
        return amount.replace(ASCII_YEN, FULLWIDTH_YEN)
    return amount


def format_date(value: datetime) -> str:
    """Short ja-JP date, e.g. 2025/1/15."""
    return f"{value.year}/{value.month}/{value.day}"


def format_timestamp(value: datetime) -> str:
    """ja-JP date and time, e.g. 2025/1/15 9:05:00."""
    return f"{format_date(value)} {value.hour}:{value:%M:%S}"


def format_deadline(deadline: GrantDeadline) -> str:
    """
    Describe a deadline.

    First match wins: rolling, next deadline, start/end window, fallback.
    """
    if deadline.is_rolling:
        return ROLLING_LABEL

    if deadline.next_deadline:
        return f"次回締切: {format_date(deadline.next_deadline)}"

    if deadline.start and deadline.end:
        return f"募集期間: {format_date(deadline.start)} - {format_date(deadline.end)}"

    return FALLBACK_LABEL


def format_status(status) -> str:
    return "募集中" if status == GrantStatus.ACTIVE else "募集予定"


def format_upfront(upfront_payment: bool) -> str:
    return "あり" if upfront_payment else "なし"


def render_grant(index: int, grant: GrantRecord) -> str:
    """
    Render one grant as a printable block.

    Args:
        index: 1-based position in the listing
        grant: Evaluated grant record

    Returns:
        Multi-line block without trailing newline
    """
    lines = [
        f"=== 助成金 {index} ===",
        f"タイトル: {grant.title}",
        f"団体: {grant.organization}",
        f"助成額: {format_amount(grant.amount, grant.currency)} ({grant.currency.value})",
        f"募集状況: {format_status(grant.status)}",
        f"締切: {format_deadline(grant.deadline)}",
        f"カテゴリー: {', '.join(grant.category)}",
        f"応募資格: {grant.eligibility}",
        f"前払い: {format_upfront(grant.upfront_payment)}",
        f"説明: {grant.description}",
        f"詳細: {grant.url}",
    ]
    return "\n".join(lines)
