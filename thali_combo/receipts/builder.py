from __future__ import annotations

from typing import Any

from ..config import DEFAULT_THALI_CONFIG, ThaliConfig
from ..menu.models import ThaliLine
from ..menu.validation import parse_records


def _format_amount(value: int | float) -> str:
    """Print a price as written: 250 not 250.0, 99.5 stays 99.5."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_receipt(
    customer_name: Any,
    records: Any,
    config: ThaliConfig = DEFAULT_THALI_CONFIG,
) -> str:
    """
    Render a plain-text receipt for a customer's thali order.

    Prices are printed in their natural form rather than to two decimals.
    Returns an empty string if ``customer_name`` is not a string or
    ``records`` is not a non-empty list/tuple of named, priced thalis.
    """
    if not isinstance(customer_name, str):
        return ""

    lines = parse_records(records, ThaliLine)
    if not lines:
        return ""

    prefix = config.currency_prefix
    total = sum(line.price for line in lines)

    out = [
        config.receipt_title,
        "---",
        f"Customer: {customer_name.upper()}",
    ]
    for line in lines:
        out.append(f"- {line.name} x {prefix}{_format_amount(line.price)}")
    out.append("---")
    out.append(f"Total: {prefix}{_format_amount(total)}")
    out.append(f"Items: {len(lines)}")

    return "\n".join(out)
