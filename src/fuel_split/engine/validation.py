"""Input validation — every violated rule is reported at once.

Rules run in a fixed order and never short-circuit, so the user can fix
all problems in one pass.  The paying-people rule is checked only when
the people count parsed to a finite number; an unparseable count is
already reported by the whole-number rule.
"""

from __future__ import annotations

import logging
import math

from fuel_split.config.trip import TripInput
from fuel_split.engine.parsing import parse_trip
from fuel_split.models.results import ParsedTrip

logger = logging.getLogger(__name__)

DISTANCE_ERROR = "Distance must be greater than 0 km."
MILEAGE_ERROR = "Mileage must be greater than 0 km/l."
FUEL_PRICE_ERROR = "Fuel price must be greater than 0 per liter."
PEOPLE_ERROR = "Number of people must be a whole number greater than 0."
PAYING_PEOPLE_ERROR = "At least 1 person must be paying after owner exclusion."


class TripValidationError(ValueError):
    """Raised when a trip cannot be split; ``messages`` keeps rule order."""

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


def _is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def check_parsed_trip(parsed: ParsedTrip) -> list[str]:
    """Validation messages for already-parsed values, in rule order."""
    errors: list[str] = []
    if not _is_positive(parsed.distance_km):
        errors.append(DISTANCE_ERROR)
    if not _is_positive(parsed.mileage_km_per_liter):
        errors.append(MILEAGE_ERROR)
    if not _is_positive(parsed.fuel_price_per_liter):
        errors.append(FUEL_PRICE_ERROR)

    people = parsed.people_count
    if not (_is_positive(people) and people.is_integer()):
        errors.append(PEOPLE_ERROR)

    if math.isfinite(people) and parsed.paying_people < 1:
        errors.append(PAYING_PEOPLE_ERROR)

    return errors


def validate_trip(trip: TripInput) -> list[str]:
    """Parse the form and return its validation messages (empty = valid)."""
    errors = check_parsed_trip(parse_trip(trip))
    if errors:
        logger.info("Trip rejected with %d validation error(s)", len(errors))
    return errors
