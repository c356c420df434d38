from __future__ import annotations

from typing import Annotated, Any, Union

from pydantic import (
    AfterValidator,
    AllowInfNan,
    BaseModel,
    ConfigDict,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
)
from pydantic.alias_generators import to_camel


def _fits_in_float(value: int) -> int:
    try:
        float(value)
    except OverflowError:
        raise ValueError("price is too large to format") from None
    return value


# bool is rejected by both strict members
Price = Union[
    Annotated[StrictInt, AfterValidator(_fits_in_float)],
    Annotated[StrictFloat, AllowInfNan(False)],
]


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class _RecordModel(_CamelModel):
    model_config = ConfigDict(strict=True)


class ThaliLine(_RecordModel):
    """The part of a thali a receipt line needs."""

    name: StrictStr
    price: Price


class ThaliTally(ThaliLine):
    """The part of a thali the menu stats need."""

    is_veg: StrictBool


class ThaliListing(_RecordModel):
    """The part of a thali the menu search needs."""

    name: StrictStr
    items: tuple[StrictStr, ...]

    @field_validator("items", mode="before")
    @classmethod
    def _items_as_tuple(cls, value: Any) -> Any:
        if isinstance(value, list):
            return tuple(value)
        return value


class Thali(ThaliListing):
    """A complete combo platter record: name, dishes, price and veg flag."""

    price: Price
    is_veg: StrictBool


class ThaliStats(_CamelModel):
    total_thalis: int
    veg_count: int
    non_veg_count: int
    avg_price: str
    cheapest: Union[int, float]
    costliest: Union[int, float]
    names: list[str]
