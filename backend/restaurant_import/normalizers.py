from __future__ import annotations

import logging
import math
import re
from typing import Iterator, NamedTuple

from .config import DEFAULT_IMPORT_CONFIG, GeoPoint

logger = logging.getLogger(__name__)

_TIME_PATTERN = re.compile(r"(\d{1,2}):(\d{2})(AM|PM)")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class TimeToken(NamedTuple):
    hour: int
    minute: str
    period: str

    def to_24h(self) -> str:
        hour = self.hour
        if self.period == "PM" and hour != 12:
            hour += 12
        elif self.period == "AM" and hour == 12:
            hour = 0
        return f"{hour:02d}:{self.minute}"


class OperatingHours(NamedTuple):
    opening: str
    closing: str


class Coordinates(NamedTuple):
    latitude: float
    longitude: float


def iter_time_tokens(text: str) -> Iterator[TimeToken]:
    """Yield every ``H:MMAM`` / ``HH:MMPM`` token in order of appearance."""
    for match in _TIME_PATTERN.finditer(text):
        yield TimeToken(int(match.group(1)), match.group(2), match.group(3))


def parse_operating_hours(
    hours_text: str | None,
    default_opening: str = DEFAULT_IMPORT_CONFIG.default_opening,
    default_closing: str = DEFAULT_IMPORT_CONFIG.default_closing,
) -> OperatingHours:
    """
    Collapse a free-text schedule into one opening and one closing time.

    e.g. "Mon-Thu: 11:30AM-2:30PM & 6:00PM-10:00PM; Fri-Sun: 11:30AM-10:30PM"
    gives ("11:30", "22:30"): the earliest and latest times found, so any
    midday closure is lost. Fewer than two times gives the defaults.
    """
    try:
        times = sorted(token.to_24h() for token in iter_time_tokens(hours_text))
    except (TypeError, ValueError):
        logger.warning("Error parsing hours %r, using defaults", hours_text, exc_info=True)
        return OperatingHours(default_opening, default_closing)

    if len(times) < 2:
        return OperatingHours(default_opening, default_closing)
    return OperatingHours(times[0], times[-1])


def convert_price_range(
    price_text: str | None,
    default: str = DEFAULT_IMPORT_CONFIG.default_price_range,
) -> str:
    if not price_text:
        return default

    price = price_text.replace("$", "", 1).split("-")[0]
    match = _LEADING_INT.match(price)
    if match is None:
        logger.debug("Unparseable price %r treated as 0", price_text)
        value = 0
    else:
        value = int(match.group(1))

    if value < 10:
        return "$"
    if value < 20:
        return "$$"
    if value < 30:
        return "$$$"
    return "$$$$"


def parse_rating(
    rating_text: str | None,
    default: float = DEFAULT_IMPORT_CONFIG.default_rating,
) -> float:
    if not rating_text:
        return default
    match = _LEADING_FLOAT.match(rating_text)
    if match is None:
        logger.debug("Unparseable rating %r, using %s", rating_text, default)
        return default
    value = float(match.group(1))
    if not math.isfinite(value):
        logger.debug("Out of range rating %r, using %s", rating_text, default)
        return default
    return value


def generate_coordinates(
    index: int,
    total: int,
    center: GeoPoint = DEFAULT_IMPORT_CONFIG.center,
    radius: float = DEFAULT_IMPORT_CONFIG.radius,
) -> Coordinates:
    """
    Place row ``index`` of ``total`` on a circle around ``center``.

    These are placeholder positions spread evenly by row order, not a
    geocoding result.
    """
    if total <= 0:
        raise ValueError(f"total must be positive, got {total}")

    angle = (index / total) * 2 * math.pi
    return Coordinates(
        latitude=center.lat + radius * math.cos(angle),
        longitude=center.lng + radius * math.sin(angle),
    )
