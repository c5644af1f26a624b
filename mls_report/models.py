from dataclasses import dataclass
from datetime import date
from typing import NamedTuple

from mls_report.errors import MissingRequiredFieldError


class RoomDimension(NamedTuple):
    length: float
    width: float


@dataclass
class ListingRecord:
    index: int = 0
    mls_number: str | None = None
    building_address: str | None = None
    unit_number: str | None = None
    exposure: str | None = None
    corner_unit: bool | None = None
    size_sqft: str | None = None
    list_price: str | None = None
    sold_price: str | None = None
    price_difference: str | None = None
    days_on_market: int | None = None
    list_date: date | None = None
    sold_date: date | None = None
    repeated: bool = False

    @property
    def property_key(self) -> str:
        if not (self.building_address or "").strip() or not (self.unit_number or "").strip():
            raise MissingRequiredFieldError("property key", self.index or None)
        return f"{self.building_address} {self.unit_number}"
