# asset_tracker/models.py
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import IntEnum


class Office(IntEnum):
    """Office locations, in display/sort order."""

    NEW_YORK = 0
    LONDON = 1
    TOKYO = 2

    @property
    def display_name(self) -> str:
        names = {
            0: "NewYork",
            1: "London",
            2: "Tokyo",
        }
        return names[self.value]


class Kind(IntEnum):
    """Kind of equipment; computers list before phones."""

    COMPUTER = 0
    PHONE = 1

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class Item:
    """
    A piece of office equipment.
    Prices are always held in USD; conversion to the office currency
    happens at display time.
    """
    name: str
    purchase_date: date
    price_usd: Decimal
    office: Office
    kind: Kind

    def __post_init__(self):
        price = self.price_usd
        if not isinstance(price, Decimal):
            price = Decimal(str(price))
            object.__setattr__(self, "price_usd", price)
        if not price.is_finite() or price < 0:
            raise ValueError(f"price_usd must be a non-negative number, got {self.price_usd}")
