"""Result types — the contract between engine, report, and dashboard.

A ``TripResult`` only exists for input that passed validation.  Callers
that must not raise get a ``CalculationOutcome`` instead, which carries
either the result or the ordered validation messages, never both.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class ParsedTrip(BaseModel):
    """Trip form values after text → float parsing.

    Unparseable or blank fields are ``nan`` so that every positivity
    check fails for them.
    """

    model_config = ConfigDict(frozen=True)

    distance_km: float
    mileage_km_per_liter: float
    fuel_price_per_liter: float
    people_count: float
    """Kept as float so a fractional entry can be reported, not truncated."""
    include_owner: bool
    rounding_increment: float

    @property
    def paying_people(self) -> float:
        """People splitting the cost once the owner rule is applied."""
        return self.people_count if self.include_owner else self.people_count - 1


class TripResult(BaseModel):
    """Derived figures for one valid trip. Recomputed on every request."""

    model_config = ConfigDict(frozen=True)

    fuel_consumed_liters: float
    """distance / mileage."""

    total_cost: float
    """fuel_consumed × price per liter."""

    paying_people_count: int

    raw_per_person: float
    """Exact share before rounding = total_cost / paying_people_count."""

    rounded_per_person: float
    """raw_per_person snapped to the nearest rounding increment."""

    @property
    def rounding_adjustment(self) -> float:
        """How much each person pays above (or below) the exact share."""
        return self.rounded_per_person - self.raw_per_person


class CalculationOutcome(BaseModel):
    """Either a result or the validation messages that prevented one."""

    model_config = ConfigDict(frozen=True)

    result: TripResult | None = None
    errors: list[str] = []

    @model_validator(mode="after")
    def _exactly_one(self) -> "CalculationOutcome":
        if (self.result is None) == (not self.errors):
            raise ValueError("outcome must carry either a result or errors, not both")
        return self

    @property
    def ok(self) -> bool:
        return self.result is not None
