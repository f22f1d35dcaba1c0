# asset_tracker/prompts.py
"""
Console input parsing.

parse_* functions turn one line of text into a value or raise ValueError
with a message fit to show the user. prompt_* functions keep asking until
parse_* succeeds. Input and output callables are injectable so the loops
can be driven from tests.
"""
import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable

from .logger import get_logger
from .models import Item, Kind, Office

logger = get_logger(__name__)

InputFn = Callable[[], str]
OutputFn = Callable[[str], None]

DATE_FORMATS = (
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%d.%m.%Y",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
)

_OFFICE_ALIASES = {
    "newyork": Office.NEW_YORK,
    "new york": Office.NEW_YORK,
    "london": Office.LONDON,
    "tokyo": Office.TOKYO,
}

_KIND_ALIASES = {
    "1": Kind.COMPUTER,
    "computer": Kind.COMPUTER,
    "2": Kind.PHONE,
    "phone": Kind.PHONE,
}


def parse_date(text: str) -> datetime.date:
    value = text.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.datetime.strptime(value, fmt).date()
        except ValueError:
            continue
    raise ValueError("Invalid date format. Please enter in yyyy-MM-dd format:")


def parse_price(text: str) -> Decimal:
    try:
        price = Decimal(text.strip())
    except InvalidOperation:
        raise ValueError("Invalid price. Please enter a valid number:")
    if not price.is_finite() or price < 0:
        raise ValueError("Invalid price. Please enter a non-negative number:")
    return price


def parse_office(text: str) -> Office:
    value = text.strip().lower()
    if value in _OFFICE_ALIASES:
        return _OFFICE_ALIASES[value]
    # numeric values are accepted as well, e.g. "2" for Tokyo
    if value.isdecimal() and int(value) in {o.value for o in Office}:
        return Office(int(value))
    raise ValueError("Invalid office location. Please enter NewYork, London, or Tokyo:")


def parse_kind(text: str) -> Kind:
    kind = _KIND_ALIASES.get(text.strip().lower())
    if kind is None:
        raise ValueError("Invalid choice. Item not added.")
    return kind


def _prompt(message: str, parser, input_fn: InputFn, output_fn: OutputFn):
    output_fn(message)
    while True:
        raw = input_fn()
        try:
            return parser(raw)
        except ValueError as e:
            logger.debug("Rejected input %r: %s", raw, e)
            output_fn(str(e))


def prompt_date(input_fn: InputFn = input, output_fn: OutputFn = print) -> datetime.date:
    return _prompt("Enter purchase date (yyyy-MM-dd):", parse_date, input_fn, output_fn)


def prompt_price(input_fn: InputFn = input, output_fn: OutputFn = print) -> Decimal:
    return _prompt("Enter price in USD:", parse_price, input_fn, output_fn)


def prompt_office(input_fn: InputFn = input, output_fn: OutputFn = print) -> Office:
    return _prompt(
        "Enter office location (NewYork, London, Tokyo):", parse_office, input_fn, output_fn
    )


def read_item(kind_choice: str, input_fn: InputFn = input, output_fn: OutputFn = print) -> Item:
    """
    Read the remaining fields of a new item.
    The kind choice is only checked once every field has been entered;
    an invalid choice raises ValueError and no item is built.
    """
    output_fn("Enter name:")
    name = input_fn().strip()
    purchase_date = prompt_date(input_fn, output_fn)
    price_usd = prompt_price(input_fn, output_fn)
    office = prompt_office(input_fn, output_fn)
    kind = parse_kind(kind_choice)
    return Item(name, purchase_date, price_usd, office, kind)
