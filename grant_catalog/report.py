"""
Console and JSON rendering of evaluated grants.
"""

import json
from datetime import datetime
from typing import Sequence

from .core.formatting import format_timestamp, render_grant
from .core.models import GrantRecord


def build_report(grants: Sequence[GrantRecord], generated_at: datetime) -> str:
    """
    Build the text listing printed to stdout.

    Args:
        grants: Evaluated grants in display order
        generated_at: Timestamp shown in the header

    Returns:
        Full report text
    """
    parts = [
        "",
        f"現在の日時: {format_timestamp(generated_at)}",
        f"取得した助成金数: {len(grants)}",
    ]
    for i, grant in enumerate(grants, start=1):
        parts.append("")
        parts.append(render_grant(i, grant))

    return "\n".join(parts)


def grants_to_json(grants: Sequence[GrantRecord], generated_at: datetime) -> str:
    """Serialize grants as a JSON document."""
    data = {
        "generatedAt": generated_at.isoformat(),
        "count": len(grants),
        "grants": [g.to_dict() for g in grants],
    }
    return json.dumps(data, ensure_ascii=False, indent=2)
