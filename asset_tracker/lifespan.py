# asset_tracker/lifespan.py
import datetime
import os
from enum import Enum

import pytz

from .logger import get_logger

logger = get_logger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid %s=%r; using default %d.", name, raw, default)
        return default


LIFESPAN_YEARS = _env_int("TRACKER_LIFESPAN_YEARS", 3)
EXPIRING_DAYS = _env_int("TRACKER_EXPIRING_DAYS", 90)
WARNING_DAYS = _env_int("TRACKER_WARNING_DAYS", 180)


def _load_timezone(name: str):
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        logger.warning("Unknown TRACKER_TIMEZONE %r; falling back to UTC.", name)
        return pytz.UTC


# Calendar "today" is taken in this zone, UTC unless set. Set it to the
# local zone (e.g. "Europe/London") for lifespans to roll over at local
# midnight.
TIMEZONE = _load_timezone(os.getenv("TRACKER_TIMEZONE", "UTC"))


class LifespanStatus(Enum):
    OK = "ok"
    WARNING = "warning"
    EXPIRING = "expiring"


def today() -> datetime.date:
    return datetime.datetime.now(tz=TIMEZONE).date()


def end_of_life(purchase_date: datetime.date, years: int = LIFESPAN_YEARS) -> datetime.date:
    """
    Date the item reaches the end of its expected lifespan.
    A Feb 29 purchase ends on Feb 28 when the target year is not a leap year.
    """
    target_year = purchase_date.year + years
    try:
        return purchase_date.replace(year=target_year)
    except ValueError:
        return purchase_date.replace(year=target_year, day=28)


def remaining_lifespan(
    purchase_date: datetime.date, on: datetime.date | None = None
) -> datetime.timedelta:
    return end_of_life(purchase_date) - (on or today())


def lifespan_status(
    purchase_date: datetime.date, on: datetime.date | None = None
) -> LifespanStatus:
    remaining = remaining_lifespan(purchase_date, on)
    if remaining < datetime.timedelta(days=EXPIRING_DAYS):
        return LifespanStatus.EXPIRING
    if remaining < datetime.timedelta(days=WARNING_DAYS):
        return LifespanStatus.WARNING
    return LifespanStatus.OK
