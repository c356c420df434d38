"""
Validated construction of thali records.

Callers hand us values of unknown shape. Each helper either returns the
parsed pydantic model or ``None``; pydantic's ``ValidationError`` never
leaves this module.
"""
from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def is_sequence(value: Any) -> bool:
    """Lists and tuples count as ordered collections; strings do not."""
    return isinstance(value, (list, tuple))


def parse_record(value: Any, model: type[ModelT]) -> ModelT | None:
    """Validate one value as ``model``, returning None if it does not fit."""
    if isinstance(value, model):
        return value
    if isinstance(value, BaseModel):
        # another view of the same record, e.g. a Thali read as a ThaliLine
        value = value.model_dump(by_alias=True)

    try:
        return model.model_validate(value)
    except ValidationError as exc:
        logger.debug("Rejected %s input: %s", model.__name__, exc)
        return None


def parse_records(values: Any, model: type[ModelT]) -> list[ModelT] | None:
    """
    Validate every element of a collection as ``model``.

    Returns None when ``values`` is not a list/tuple or when any element is
    malformed. An empty collection parses to an empty list.
    """
    if not is_sequence(values):
        logger.debug("Rejected %s collection of type %s", model.__name__, type(values).__name__)
        return None

    parsed: list[ModelT] = []
    for index, value in enumerate(values):
        record = parse_record(value, model)
        if record is None:
            logger.warning(
                "Malformed %s at index %d, rejecting the whole collection",
                model.__name__,
                index,
            )
            return None
        parsed.append(record)
    return parsed

