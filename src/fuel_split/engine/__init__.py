"""Engine — parsing, validation and the fuel cost split."""

from fuel_split.engine.parsing import parse_number, parse_trip
from fuel_split.engine.validation import TripValidationError, check_parsed_trip, validate_trip
from fuel_split.engine.split import calculate_split, compute_split, evaluate_trip, round_to_increment

__all__ = [
    "parse_number",
    "parse_trip",
    "TripValidationError",
    "check_parsed_trip",
    "validate_trip",
    "calculate_split",
    "compute_split",
    "evaluate_trip",
    "round_to_increment",
]
