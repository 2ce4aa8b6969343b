"""Tests for engine/split.py — hand-calculated expected values."""

from __future__ import annotations

import math

import pytest
from pydantic import ValidationError

from fuel_split.config import TripInput
from fuel_split.engine import (
    calculate_split,
    compute_split,
    evaluate_trip,
    parse_trip,
    round_to_increment,
    validate_trip,
)


def test_default_scenario(trip: TripInput):
    r = calculate_split(trip)
    # 120 / 40 = 3 l; 3 × 107.4 = 322.2; 322.2 / 3 = 107.4 → 107
    assert r.fuel_consumed_liters == pytest.approx(3.0)
    assert r.total_cost == pytest.approx(322.2)
    assert r.paying_people_count == 3
    assert r.raw_per_person == pytest.approx(107.4)
    assert r.rounded_per_person == 107


def test_owner_excluded_splits_among_others(owner_excluded_trip: TripInput):
    r = calculate_split(owner_excluded_trip)
    # 322.2 / 2 = 161.1 → 161
    assert r.paying_people_count == 2
    assert r.raw_per_person == pytest.approx(161.1)
    assert r.rounded_per_person == 161


@pytest.mark.parametrize(
    "distance, mileage, price, people, include_owner",
    [
        (120.0, 40.0, 107.4, 3, True),
        (55.5, 18.2, 96.8, 4, False),
        (1.0, 0.5, 0.01, 1, True),
        (860.0, 12.5, 101.25, 7, False),
    ],
)
def test_total_and_share_formulas(distance, mileage, price, people, include_owner):
    t = TripInput(
        distance=str(distance), mileage=str(mileage), fuel_price=str(price),
        people=str(people), include_owner=include_owner, rounding="0",
    )
    r = calculate_split(t)
    paying = people if include_owner else people - 1
    assert r.total_cost == pytest.approx((distance / mileage) * price)
    assert r.raw_per_person == pytest.approx(r.total_cost / paying)
    assert r.paying_people_count == paying


def test_zero_rounding_keeps_raw_share(trip: TripInput):
    r = calculate_split(trip.model_copy(update={"rounding": "0"}))
    assert r.rounded_per_person == r.raw_per_person


def test_unparseable_rounding_keeps_raw_share(trip: TripInput):
    r = calculate_split(trip.model_copy(update={"rounding": ""}))
    assert r.rounded_per_person == r.raw_per_person


@pytest.mark.parametrize(
    "rounding, expected",
    [("0.5", 107.5), ("1", 107.0), ("5", 105.0), ("10", 110.0)],
)
def test_rounding_options(trip: TripInput, rounding: str, expected: float):
    r = calculate_split(trip.model_copy(update={"rounding": rounding}))
    assert r.rounded_per_person == pytest.approx(expected)


def test_rounding_adjustment(trip: TripInput):
    r = calculate_split(trip.model_copy(update={"rounding": "10"}))
    # 110 − 107.4 = 2.6 extra per person
    assert r.rounding_adjustment == pytest.approx(2.6)


def test_overflowing_cost_does_not_raise():
    """1e300 km at 1e-10 km/l passes validation but the fuel use overflows."""
    t = TripInput(distance="1e300", mileage="1e-10", fuel_price="107.4", people="3", rounding="1")
    assert validate_trip(t) == []
    outcome = evaluate_trip(t)
    assert outcome.ok
    assert math.isinf(outcome.result.total_cost)
    assert math.isinf(outcome.result.rounded_per_person)


def test_compute_split_on_parsed_values(trip: TripInput):
    assert compute_split(parse_trip(trip)) == calculate_split(trip)


def test_result_is_immutable(trip: TripInput):
    r = calculate_split(trip)
    with pytest.raises(ValidationError):
        r.total_cost = 0.0


# ═══════════════════════════════════════════════════════════════════════════
# round_to_increment
# ═══════════════════════════════════════════════════════════════════════════

class TestRoundToIncrement:

    def test_nearest_multiple(self):
        assert round_to_increment(107.4, 1) == 107
        assert round_to_increment(107.6, 1) == 108
        assert round_to_increment(12.0, 5) == 10
        assert round_to_increment(13.0, 5) == 15

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinite_value_is_returned_unchanged(self, value: float):
        assert round_to_increment(value, 1) == value

    def test_nan_value_is_returned_unchanged(self):
        assert math.isnan(round_to_increment(math.nan, 1))

    def test_overflowing_quotient_is_returned_unchanged(self):
        assert round_to_increment(1e308, 1e-10) == 1e308

    def test_ties_round_up(self):
        assert round_to_increment(2.5, 1) == 3
        assert round_to_increment(7.5, 5) == 10
        assert round_to_increment(0.25, 0.5) == 0.5

    @pytest.mark.parametrize("increment", [0, -1, -0.5, math.nan, math.inf])
    def test_non_positive_or_non_finite_is_identity(self, increment: float):
        assert round_to_increment(107.4, increment) == 107.4

    @pytest.mark.parametrize("value", [0.3, 107.4, 161.1, 999.99, 1234.5])
    @pytest.mark.parametrize("increment", [0.5, 1, 5, 10])
    def test_idempotent(self, value: float, increment: float):
        once = round_to_increment(value, increment)
        assert round_to_increment(once, increment) == once
