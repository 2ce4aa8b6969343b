"""Shareable plain-text summary of a split."""

from __future__ import annotations

import re

from fuel_split.config.settings import Settings, get_settings
from fuel_split.config.trip import TripInput
from fuel_split.engine.parsing import parse_number
from fuel_split.models.results import TripResult
from fuel_split.report.formatting import format_number

SUMMARY_TITLE = "TRIP COST SPLIT"
SUMMARY_RULE = "-" * 22


def build_summary_text(result: TripResult, trip: TripInput, settings: Settings | None = None) -> str:
    """Fixed-layout summary, suitable for pasting into a group chat.

    Trip figures are echoed from ``trip`` (people as typed); money figures
    come from ``result``.
    """
    settings = settings or get_settings()
    cur = settings.currency_symbol

    def fmt(value: float) -> str:
        return format_number(value, settings.max_fraction_digits, settings.number_locale)

    owner_phrase = "including" if trip.include_owner else "excluding"
    return "\n".join([
        SUMMARY_TITLE,
        SUMMARY_RULE,
        f"Total Cost: {cur}{fmt(result.total_cost)}",
        f"Distance: {fmt(parse_number(trip.distance))} km",
        f"Mileage: {fmt(parse_number(trip.mileage))} km/l",
        f"Fuel Price: {cur}{fmt(parse_number(trip.fuel_price))}/l",
        f"People in vehicle: {trip.people}",
        "",
        "SPLIT:",
        f"Each person pays: {cur}{fmt(result.rounded_per_person)}",
        f"({result.paying_people_count} people paying {owner_phrase} owner)",
    ])


_FIGURE_PATTERNS = {
    "total_cost": re.compile(r"^Total Cost: \D*([\d,.]+)$", re.MULTILINE),
    "distance_km": re.compile(r"^Distance: ([\d,.]+) km$", re.MULTILINE),
    "mileage_km_per_liter": re.compile(r"^Mileage: ([\d,.]+) km/l$", re.MULTILINE),
    "fuel_price_per_liter": re.compile(r"^Fuel Price: \D*([\d,.]+)/l$", re.MULTILINE),
    "rounded_per_person": re.compile(r"^Each person pays: \D*([\d,.]+)$", re.MULTILINE),
    "paying_people_count": re.compile(r"^\((\d+) people paying", re.MULTILINE),
}


def read_summary_figures(text: str) -> dict[str, float]:
    """Read the displayed numbers back out of a summary.

    Figures that are missing from ``text`` are left out of the result.
    """
    figures: dict[str, float] = {}
    for name, pattern in _FIGURE_PATTERNS.items():
        match = pattern.search(text)
        if match:
            figures[name] = float(match.group(1).replace(",", ""))
    return figures
