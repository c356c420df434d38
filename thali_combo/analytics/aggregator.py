from __future__ import annotations

from typing import Any

from ..menu.models import ThaliStats, ThaliTally
from ..menu.validation import parse_records


def compute_stats(records: Any) -> ThaliStats | None:
    """Summarise a menu; None for anything but a non-empty list/tuple of thalis."""
    tallies = parse_records(records, ThaliTally)
    if not tallies:
        return None

    total = len(tallies)
    prices = [t.price for t in tallies]
    veg_count = sum(1 for t in tallies if t.is_veg)

    return ThaliStats(
        total_thalis=total,
        veg_count=veg_count,
        non_veg_count=total - veg_count,
        avg_price=f"{sum(prices) / total:.2f}",
        cheapest=min(prices),
        costliest=max(prices),
        names=[t.name for t in tallies],
    )
