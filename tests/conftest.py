"""Shared test fixtures — the default form and a few variations of it."""

from __future__ import annotations

import pytest

from fuel_split.config import Settings, TripInput


@pytest.fixture
def trip() -> TripInput:
    """120 km at 40 km/l, petrol at 107.4, three people, owner pays, round to 1."""
    return TripInput(
        distance="120",
        mileage="40",
        fuel_type="petrol",
        fuel_price="107.4",
        people="3",
        include_owner=True,
        rounding="1",
    )


@pytest.fixture
def owner_excluded_trip(trip: TripInput) -> TripInput:
    return trip.model_copy(update={"include_owner": False})


@pytest.fixture
def settings() -> Settings:
    return Settings(
        FUEL_SPLIT_CURRENCY_SYMBOL="₹",
        FUEL_SPLIT_NUMBER_LOCALE="en-IN",
        FUEL_SPLIT_MAX_FRACTION_DIGITS=2,
        FUEL_SPLIT_LOG_LEVEL="INFO",
    )
