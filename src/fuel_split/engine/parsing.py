"""Text → number parsing for form fields."""

from __future__ import annotations

import math
import re

from fuel_split.config.trip import TripInput
from fuel_split.models.results import ParsedTrip

# Plain decimal with optional exponent. Python's float() would also take
# "inf", "nan" and "1_000", none of which a number field should accept.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(text: str) -> float:
    """Parse form text to a float; ``nan`` when blank or not a number."""
    stripped = text.strip()
    if not _NUMBER_RE.fullmatch(stripped):
        return math.nan
    return float(stripped)


def parse_trip(trip: TripInput) -> ParsedTrip:
    """Parse every numeric field of the form."""
    return ParsedTrip(
        distance_km=parse_number(trip.distance),
        mileage_km_per_liter=parse_number(trip.mileage),
        fuel_price_per_liter=parse_number(trip.fuel_price),
        people_count=parse_number(trip.people),
        include_owner=trip.include_owner,
        rounding_increment=parse_number(trip.rounding),
    )
