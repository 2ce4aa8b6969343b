"""Result models — calculation output contracts."""

from fuel_split.models.results import (
    CalculationOutcome,
    ParsedTrip,
    TripResult,
)

__all__ = [
    "CalculationOutcome",
    "ParsedTrip",
    "TripResult",
]
