"""Trip form inputs, fuel price presets and rounding options."""

from typing import Literal

from pydantic import BaseModel, Field


FuelType = Literal["petrol", "diesel", "custom"]

# Default price per liter for each named fuel; "custom" has no preset.
FUEL_PRESETS: dict[str, float] = {
    "petrol": 107.4,
    "diesel": 96.8,
}

# value → label, in the order the form offers them
ROUNDING_OPTIONS: dict[str, str] = {
    "0": "No rounding",
    "0.5": "Round to 0.5",
    "1": "Round to 1",
    "5": "Round to 5",
    "10": "Round to 10",
}


def preset_price(fuel_type: FuelType) -> float | None:
    """Preset price per liter for a named fuel, ``None`` for custom."""
    return FUEL_PRESETS.get(fuel_type)


class TripInput(BaseModel):
    """Raw trip form values.

    Numeric fields hold the text the user typed; they are parsed and
    checked by ``validate_trip`` before any arithmetic happens, so no
    numeric constraints live on this model.
    """

    distance: str = Field(default="120", description="Trip distance (km)")
    mileage: str = Field(default="40", description="Vehicle mileage (km per liter)")
    fuel_type: FuelType = Field(default="petrol", description="Named fuel preset or 'custom'")
    fuel_price: str = Field(
        default=str(FUEL_PRESETS["petrol"]),
        description="Fuel price per liter. Overwritten by the preset when a named fuel is picked.",
    )
    people: str = Field(default="3", description="Number of people in the vehicle, owner included")
    include_owner: bool = Field(
        default=True,
        description="Whether the vehicle owner pays a share. "
                    "When False the cost is split among the other occupants.",
    )
    rounding: str = Field(
        default="1",
        description="Rounding increment for each share (0 = no rounding)",
    )
