"""
Aircraft domain models.

Describes the cargo deck geometry used for ULD load planning: slot counts,
balance arms and restricted (nose/tail) slot counts per deck.
"""

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_ROW_LENGTH = 8


def _is_count(v: Any, minimum: int = 0) -> bool:
    """Whole number no smaller than `minimum` (bools excluded)."""
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        return False
    return float(v).is_integer() and v >= minimum


class DeckName(str, Enum):
    """Aircraft cargo deck."""

    MAIN = "main"
    LOWER = "lower"


class DeckProfile(BaseModel):
    """
    Cargo deck geometry.

    `slot_arms` must hold one arm per slot; any other length is regenerated
    when the slot pool is built. `fore_restricted` / `aft_restricted` left as
    None means "unspecified" and the default restriction rule applies.
    """

    slots: int = Field(default=0, ge=0)
    row_length: int = Field(default=DEFAULT_ROW_LENGTH, ge=1, alias="rowLength")
    slot_arms: list[float] = Field(default_factory=list, alias="slotArms")
    fore_restricted: int | None = Field(default=None, ge=0, alias="noseSlots")
    aft_restricted: int | None = Field(default=None, ge=0, alias="tailSlots")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("slot_arms", mode="before")
    @classmethod
    def drop_malformed_arms(cls, v: Any) -> Any:
        """Unusable arm lists are discarded so they get regenerated."""
        if v is None:
            return []
        if not isinstance(v, (list, tuple)):
            logger.warning("Ignoring non-list slot arms: %r", v)
            return []
        if not all(isinstance(a, (int, float)) and not isinstance(a, bool) for a in v):
            logger.warning("Ignoring slot arms with non-numeric values: %r", v)
            return []
        return list(v)

    @field_validator("row_length", mode="before")
    @classmethod
    def reset_malformed_row_length(cls, v: Any) -> Any:
        if _is_count(v, minimum=1):
            return v
        logger.warning("Ignoring invalid row length %r, using %d", v, DEFAULT_ROW_LENGTH)
        return DEFAULT_ROW_LENGTH

    @field_validator("fore_restricted", "aft_restricted", mode="before")
    @classmethod
    def unset_malformed_restriction(cls, v: Any) -> Any:
        """Invalid nose/tail counts fall back to the default restriction rule."""
        if v is None or _is_count(v):
            return v
        logger.warning("Ignoring invalid restricted slot count: %r", v)
        return None

    @property
    def has_consistent_arms(self) -> bool:
        return len(self.slot_arms) == self.slots


class AircraftProfile(BaseModel):
    """Aircraft type with cargo deck geometry."""

    model: str = Field(..., min_length=1)
    mtw_kg: int = Field(default=0, ge=0, alias="mtw")
    main_deck: DeckProfile = Field(default_factory=DeckProfile, alias="mainDeck")
    lower_deck: DeckProfile = Field(default_factory=DeckProfile, alias="lowerDeck")
    target_arm: float | None = Field(default=None, alias="targetArm")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("mtw_kg", mode="before")
    @classmethod
    def reset_malformed_mtw(cls, v: Any) -> Any:
        if _is_count(v):
            return v
        logger.warning("Ignoring invalid maximum takeoff weight: %r", v)
        return 0

    def deck(self, name: DeckName) -> DeckProfile:
        """Get the profile of a deck by name."""
        return self.main_deck if name == DeckName.MAIN else self.lower_deck

    @property
    def total_slots(self) -> int:
        return self.main_deck.slots + self.lower_deck.slots


# Common freighter profiles
AIRCRAFT_PROFILES: dict[str, AircraftProfile] = {
    "B737-800BCF": AircraftProfile(
        model="B737-800BCF",
        mtw_kg=23900,
        main_deck=DeckProfile(
            slots=11,
            row_length=3,
            slot_arms=[6.2, 8.3, 10.4, 12.5, 14.6, 16.7, 18.8, 20.9, 23.0, 25.1, 27.2],
        ),
    ),
    "B757-200PCF": AircraftProfile(
        model="B757-200PCF",
        mtw_kg=39780,
        main_deck=DeckProfile(slots=15, row_length=3),
        lower_deck=DeckProfile(slots=4, row_length=3),
    ),
    "B767-300F": AircraftProfile(
        model="B767-300F",
        mtw_kg=52700,
        main_deck=DeckProfile(slots=24, row_length=4),
        lower_deck=DeckProfile(slots=14, row_length=4),
    ),
    "A330-200F": AircraftProfile(
        model="A330-200F",
        mtw_kg=65000,
        main_deck=DeckProfile(slots=23, row_length=4),
        lower_deck=DeckProfile(slots=26, row_length=4),
    ),
    "B777F": AircraftProfile(
        model="B777F",
        mtw_kg=102010,
        main_deck=DeckProfile(slots=27, row_length=4),
        lower_deck=DeckProfile(slots=32, row_length=4, fore_restricted=2, aft_restricted=2),
    ),
}
