"""Trip Fuel Split Calculator — Streamlit form.

Run with:
    streamlit run src/fuel_split/dashboard/app.py

Layout: left column explains the three steps, right column holds the
trip form, configuration, results card and shareable summary.
All arithmetic lives in ``fuel_split.engine``; this file only wires
widgets to a ``CalculatorSession`` kept in ``st.session_state``.
"""

from __future__ import annotations

import asyncio

import pandas as pd
import streamlit as st

from fuel_split.config import FUEL_PRESETS, ROUNDING_OPTIONS, configure_logging, get_settings
from fuel_split.engine.parsing import parse_number
from fuel_split.report import format_number, unconfirmed_writer
from fuel_split.session import CalculatorSession

configure_logging()
_SETTINGS = get_settings()
_CUR = _SETTINGS.currency_symbol

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Trip Fuel Split Calculator", page_icon="⛽", layout="wide")

st.markdown("""
<style>
div[data-testid="stMetric"] {
    background: linear-gradient(135deg, rgba(30,34,44,0.95), rgba(22,26,35,0.98));
    border: 1px solid rgba(255,255,255,0.06);
    border-radius: 10px;
    padding: 14px 16px 12px;
}
div[data-testid="stMetric"] label {
    color: rgba(255,255,255,0.50) !important;
    font-size: 0.7rem !important;
    text-transform: uppercase;
    letter-spacing: 0.6px;
}
</style>
""", unsafe_allow_html=True)

# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------
if "calc" not in st.session_state:
    st.session_state["calc"] = CalculatorSession(_SETTINGS)
calc: CalculatorSession = st.session_state["calc"]

# Widget keys → TripInput fields
_FIELD_KEYS = {
    "w_distance": "distance",
    "w_mileage": "mileage",
    "w_fuel_price": "fuel_price",
    "w_people": "people",
    "w_include_owner": "include_owner",
    "w_rounding": "rounding",
}


def _push_trip_to_widgets() -> None:
    for key, field in _FIELD_KEYS.items():
        st.session_state[key] = getattr(calc.trip, field)
    st.session_state["w_fuel_type"] = calc.trip.fuel_type


if "w_distance" not in st.session_state:
    _push_trip_to_widgets()


def _fmt(value: float) -> str:
    return format_number(value, _SETTINGS.max_fraction_digits, _SETTINGS.number_locale)


# ---------------------------------------------------------------------------
# Callbacks
# ---------------------------------------------------------------------------

def _on_fuel_type_change() -> None:
    calc.select_fuel_type(st.session_state["w_fuel_type"])
    st.session_state["w_fuel_price"] = calc.trip.fuel_price


def _on_calculate() -> None:
    calc.update(**{field: st.session_state[key] for key, field in _FIELD_KEYS.items()})
    calc.calculate()


def _on_reset() -> None:
    calc.reset()
    _push_trip_to_widgets()


def _on_copy() -> None:
    asyncio.run(calc.copy_summary(unconfirmed_writer))


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
left, right = st.columns([0.38, 0.62], gap="large")

with left:
    st.caption("Trip Fuel Split Calculator")
    st.title("TRIP FUEL SPLIT CALCULATOR")
    st.markdown("**Split fuel fairly**")
    st.divider()
    st.subheader("How it works")
    st.markdown(
        "**01 · Enter trip details** — distance, mileage, price & people\n\n"
        "**02 · Set rules** — include vehicle owner or split equally\n\n"
        "**03 · Share cost** — copy the summary to your group chat"
    )

with right:
    st.header("Trip Details")
    st.caption("Fill in the trip basics")

    c1, c2 = st.columns(2)
    c1.text_input("Distance (km)", key="w_distance")
    c2.text_input("Mileage (km/l)", key="w_mileage")

    c1, c2 = st.columns(2)
    with c1:
        _FUEL_TYPES = ["petrol", "diesel", "custom"]
        st.radio(
            "Fuel Price",
            _FUEL_TYPES,
            key="w_fuel_type",
            horizontal=True,
            on_change=_on_fuel_type_change,
            format_func=lambda t: (
                f"{t.title()} {_CUR}{FUEL_PRESETS[t]:.2f}" if t in FUEL_PRESETS else "Custom"
            ),
        )
    c2.text_input("People in vehicle", key="w_people")

    # Presets fill the price; only custom lets the user edit it.
    st.text_input(
        f"Price ({_CUR}/l)",
        key="w_fuel_price",
        disabled=st.session_state["w_fuel_type"] != "custom",
    )
    st.caption("Using Ernakulam, Kerala · Updated Feb 10, 2026, 9:07 AM")

    st.subheader("Configuration")
    c1, c2 = st.columns(2)
    c1.checkbox("Include owner", key="w_include_owner")
    _ROUNDING_VALUES = list(ROUNDING_OPTIONS)
    c2.selectbox(
        "Rounding preference",
        _ROUNDING_VALUES,
        key="w_rounding",
        format_func=lambda v: ROUNDING_OPTIONS[v].replace("Round to ", f"Round to {_CUR}"),
    )

    c1, c2 = st.columns(2)
    c1.button("Calculate Split", type="primary", on_click=_on_calculate, use_container_width=True)
    c2.button("Reset", on_click=_on_reset, use_container_width=True)

    for message in calc.errors:
        st.error(message)

    result = calc.result
    if result is not None:
        trip = calc.trip
        m1, m2 = st.columns(2)
        m1.metric("Total fuel cost", f"{_CUR}{_fmt(result.total_cost)}")
        m2.metric("Each person pays", f"{_CUR}{_fmt(result.rounded_per_person)}")

        breakdown = pd.DataFrame([
            {"Item": "Distance", "Value": f"{_fmt(parse_number(trip.distance))} km"},
            {"Item": "Mileage", "Value": f"{_fmt(parse_number(trip.mileage))} km/l"},
            {"Item": "Fuel", "Value": f"{_CUR}{_fmt(parse_number(trip.fuel_price))}/l"},
            {"Item": "Fuel used", "Value": f"{_fmt(result.fuel_consumed_liters)} l"},
            {"Item": "People", "Value": trip.people},
            {"Item": "Exact share", "Value": f"{_CUR}{_fmt(result.raw_per_person)}"},
            {"Item": "Rounding adjustment", "Value": f"{_CUR}{_fmt(result.rounding_adjustment)}"},
        ])
        st.dataframe(breakdown, use_container_width=True, hide_index=True)
        owner_label = "owner included" if trip.include_owner else "owner excluded"
        st.caption(f"{result.paying_people_count} people splitting ({owner_label})")

        st.button("Copy Summary", on_click=_on_copy)
        if calc.copy_status.message:
            if calc.copy_status.copied:
                st.success(calc.copy_status.message)
            else:
                st.warning(calc.copy_status.message)
                # st.code carries the browser's own copy icon.
                st.code(calc.summary_text, language=None)

        with st.expander("Show summary text"):
            st.text_area(
                "Trip cost split summary",
                calc.summary_text,
                height=220,
                disabled=True,
                label_visibility="collapsed",
            )
