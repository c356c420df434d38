from __future__ import annotations

from typing import Any

from ..config import DEFAULT_THALI_CONFIG, ThaliConfig
from .models import Thali
from .validation import parse_record


def describe_thali(record: Any, config: ThaliConfig = DEFAULT_THALI_CONFIG) -> str:
    """
    Render a one-line menu description for a thali.

    e.g. ``RAJASTHANI THALI (Veg) - Items: dal, churma - Rs.250.00``

    Returns an empty string unless ``record`` carries all four fields with
    the right types.
    """
    thali = parse_record(record, Thali)
    if thali is None:
        return ""

    tag = config.veg_label if thali.is_veg else config.non_veg_label
    items = config.item_separator.join(thali.items)
    return (
        f"{thali.name.upper()} ({tag}) - Items: {items} "
        f"- {config.currency_prefix}{thali.price:.2f}"
    )
