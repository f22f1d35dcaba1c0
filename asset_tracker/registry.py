# asset_tracker/registry.py
import datetime
import os
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, List, Optional, Tuple

from .currency import convert_price, currency_symbol
from .lifespan import LifespanStatus, lifespan_status, remaining_lifespan, today
from .logger import get_logger
from .models import Item, Kind, Office

logger = get_logger(__name__)

SEED_PRESETS = os.getenv("TRACKER_SEED_PRESETS", "true").lower() == "true"


@dataclass(frozen=True)
class AssetRow:
    """One display row: the item plus the values computed for it."""
    item: Item
    price: Decimal
    currency_symbol: str
    remaining: datetime.timedelta
    status: LifespanStatus


def sort_key(item: Item) -> Tuple[int, int, datetime.date]:
    return (item.kind, item.office, item.purchase_date)


def preset_items() -> List[Item]:
    return [
        Item("S10", datetime.date(2022, 7, 16), Decimal("200"), Office.LONDON, Kind.PHONE),
        Item("Unix", datetime.date(2021, 6, 18), Decimal("600"), Office.TOKYO, Kind.COMPUTER),
        Item("Iphone", datetime.date(2023, 7, 3), Decimal("150"), Office.NEW_YORK, Kind.PHONE),
    ]


class AssetRegistry:
    """In-memory, insertion-ordered list of tracked items."""

    def __init__(self, items: Optional[List[Item]] = None) -> None:
        self._items: List[Item] = []
        for it in items or []:
            self.add(it)

    @classmethod
    def with_presets(cls) -> "AssetRegistry":
        return cls(preset_items() if SEED_PRESETS else None)

    def add(self, item: Item) -> Item:
        self._items.append(item)
        logger.info(
            "Added %s '%s' (%s, %s USD, purchased %s).",
            item.kind.display_name, item.name, item.office.display_name,
            item.price_usd, item.purchase_date.isoformat(),
        )
        return item

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def sorted_items(self) -> List[Item]:
        # sorted() is stable, so equal keys keep insertion order
        return sorted(self._items, key=sort_key)

    def list(self, on: Optional[datetime.date] = None) -> List[AssetRow]:
        """
        Items ordered by kind, then office, then purchase date, each with
        its converted price and lifespan state as of `on` (default: today).
        """
        on = on or today()
        rows = [
            AssetRow(
                item=it,
                price=convert_price(it.price_usd, it.office),
                currency_symbol=currency_symbol(it.office),
                remaining=remaining_lifespan(it.purchase_date, on),
                status=lifespan_status(it.purchase_date, on),
            )
            for it in self.sorted_items()
        ]
        logger.debug("Listing %d items as of %s.", len(rows), on.isoformat())
        return rows
