from __future__ import annotations

from typing import Any

from .models import ThaliListing
from .validation import parse_records


def _matches(listing: ThaliListing, needle: str) -> bool:
    if needle in listing.name.lower():
        return True
    return any(needle in item.lower() for item in listing.items)


def search_menu(records: Any, query: Any) -> list[Any]:
    """
    Case-insensitive substring search over thali names and dishes.

    Returns the matching input records themselves, in their original order.
    An empty query matches everything; a non-string query or a collection
    that is not a list/tuple of thalis gives ``[]``.
    """
    if not isinstance(query, str):
        return []

    listings = parse_records(records, ThaliListing)
    if listings is None:
        return []

    needle = query.lower()
    return [record for record, listing in zip(records, listings) if _matches(listing, needle)]
