import datetime
from decimal import Decimal

import pytest

from asset_tracker.models import Item, Kind, Office


@pytest.fixture
def make_item():
    """Factory for items with sensible defaults."""

    def _make(
        name="Thing",
        purchase_date=datetime.date(2024, 1, 1),
        price_usd=Decimal("100"),
        office=Office.NEW_YORK,
        kind=Kind.COMPUTER,
    ):
        return Item(name, purchase_date, price_usd, office, kind)

    return _make


@pytest.fixture
def scripted_io():
    """Feeds canned answers to input_fn and records everything printed."""

    class ScriptedIO:
        def __init__(self):
            self.answers = []
            self.printed = []

        def feed(self, *answers):
            self.answers.extend(answers)
            return self

        def input_fn(self):
            if not self.answers:
                raise EOFError
            return self.answers.pop(0)

        def output_fn(self, text=""):
            self.printed.append(text)

        @property
        def text(self):
            return "\n".join(self.printed)

    return ScriptedIO()
