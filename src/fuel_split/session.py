"""Calculator session — the state behind one open form.

Holds the current form values, the last validation errors, the last
result and the copy status.  Each is replaced wholesale on calculate,
reset or copy; nothing is shared between sessions.
"""

from __future__ import annotations

import logging
from typing import Any

from fuel_split.config.settings import Settings, get_settings
from fuel_split.config.trip import FuelType, TripInput, preset_price
from fuel_split.engine.split import evaluate_trip
from fuel_split.models.results import CalculationOutcome, TripResult
from fuel_split.report.clipboard import ClipboardWriter, CopyStatus, copy_summary
from fuel_split.report.summary import build_summary_text

logger = logging.getLogger(__name__)


class CalculatorSession:
    """Form state plus the last calculation for a single user."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.trip = TripInput()
        self.errors: list[str] = []
        self.result: TripResult | None = None
        self.copy_status = CopyStatus()

    def select_fuel_type(self, fuel_type: FuelType) -> None:
        """Pick a fuel; named fuels overwrite the price, custom keeps it."""
        price = preset_price(fuel_type)
        update: dict[str, Any] = {"fuel_type": fuel_type}
        if price is not None:
            update["fuel_price"] = str(price)
        self.trip = self.trip.model_copy(update=update)

    def update(self, **fields: Any) -> None:
        """Replace form fields, e.g. ``update(distance="250", people="4")``."""
        self.trip = TripInput.model_validate({**self.trip.model_dump(), **fields})

    def calculate(self) -> CalculationOutcome:
        outcome = evaluate_trip(self.trip)
        if outcome.ok:
            self.errors = []
            self.copy_status = CopyStatus()
            self.result = outcome.result
        else:
            self.errors = list(outcome.errors)
            self.result = None
        return outcome

    def reset(self) -> None:
        """Back to the default form with nothing calculated."""
        self.trip = TripInput()
        self.errors = []
        self.result = None
        self.copy_status = CopyStatus()

    @property
    def summary_text(self) -> str:
        if self.result is None:
            return ""
        return build_summary_text(self.result, self.trip, self.settings)

    async def copy_summary(self, writer: ClipboardWriter) -> CopyStatus:
        text = self.summary_text
        if not text:
            return self.copy_status
        self.copy_status = await copy_summary(text, writer)
        logger.debug("Copy finished: %s", self.copy_status.state)
        return self.copy_status
