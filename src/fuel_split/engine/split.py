"""Fuel cost split — pure arithmetic on a validated trip.

    fuel_consumed = distance / mileage
    total_cost    = fuel_consumed × price
    raw share     = total_cost / paying_people
    rounded share = round(raw / increment) × increment
"""

from __future__ import annotations

import logging
import math

from fuel_split.config.trip import TripInput
from fuel_split.engine.parsing import parse_trip
from fuel_split.engine.validation import TripValidationError, check_parsed_trip
from fuel_split.models.results import CalculationOutcome, ParsedTrip, TripResult

logger = logging.getLogger(__name__)


def round_to_increment(value: float, increment: float) -> float:
    """Snap ``value`` to the nearest multiple of ``increment``.

    Ties on the scaled quotient round up (``floor(q + 0.5)``).  An
    increment of zero, below zero, or not finite means no rounding.
    A non-finite value, or one whose quotient overflows, comes back as is.
    """
    if not math.isfinite(value) or not math.isfinite(increment) or increment <= 0:
        return value
    scaled = value / increment
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) * increment


def compute_split(parsed: ParsedTrip) -> TripResult:
    """Compute all derived figures. ``parsed`` must already be valid."""
    paying_people = int(parsed.paying_people)

    fuel_consumed = parsed.distance_km / parsed.mileage_km_per_liter
    total_cost = fuel_consumed * parsed.fuel_price_per_liter
    raw_per_person = total_cost / paying_people
    rounded_per_person = round_to_increment(raw_per_person, parsed.rounding_increment)

    return TripResult(
        fuel_consumed_liters=fuel_consumed,
        total_cost=total_cost,
        paying_people_count=paying_people,
        raw_per_person=raw_per_person,
        rounded_per_person=rounded_per_person,
    )


def calculate_split(trip: TripInput) -> TripResult:
    """Validate the form and compute the split.

    Raises:
        TripValidationError: with every violated rule, in order.
    """
    parsed = parse_trip(trip)
    errors = check_parsed_trip(parsed)
    if errors:
        logger.info("Trip rejected with %d validation error(s)", len(errors))
        raise TripValidationError(errors)

    result = compute_split(parsed)
    logger.debug(
        "Split %.2f across %d people → %.2f each",
        result.total_cost, result.paying_people_count, result.rounded_per_person,
    )
    return result


def evaluate_trip(trip: TripInput) -> CalculationOutcome:
    """Like ``calculate_split`` but returns the errors instead of raising."""
    try:
        return CalculationOutcome(result=calculate_split(trip))
    except TripValidationError as exc:
        return CalculationOutcome(errors=exc.messages)
