"""Configuration — trip form inputs, presets and app settings."""

from fuel_split.config.trip import (
    FUEL_PRESETS,
    ROUNDING_OPTIONS,
    FuelType,
    TripInput,
    preset_price,
)
from fuel_split.config.settings import Settings, get_settings
from fuel_split.config.log import configure_logging

__all__ = [
    "FUEL_PRESETS",
    "ROUNDING_OPTIONS",
    "FuelType",
    "TripInput",
    "preset_price",
    "Settings",
    "get_settings",
    "configure_logging",
]
