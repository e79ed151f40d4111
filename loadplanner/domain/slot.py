"""
Deck slot domain model.

A slot is an addressable ULD position on a deck with a fixed balance arm.
"""

from enum import Enum

from pydantic import BaseModel, Field

from .aircraft import DeckName


class SlotClass(str, Enum):
    """Restriction class of a slot."""

    NORMAL = "normal"
    FORE_RESTRICTED = "fore_restricted"  # Nose position
    AFT_RESTRICTED = "aft_restricted"  # Tail position


class Slot(BaseModel):
    """
    Deck slot with occupancy state.

    Deck, index, arm and restriction class are fixed at construction;
    only the occupancy fields change.
    """

    deck: DeckName = Field(frozen=True)
    index: int = Field(ge=0, frozen=True)
    arm: float = Field(frozen=True)
    slot_class: SlotClass = Field(default=SlotClass.NORMAL, frozen=True)
    occupied: bool = False
    occupant_id: str | None = None
    occupant_weight_kg: float = 0.0

    @property
    def is_restricted(self) -> bool:
        return self.slot_class != SlotClass.NORMAL

    @property
    def is_free(self) -> bool:
        return not self.occupied

    @property
    def label(self) -> str:
        """Human readable position, 1-based (e.g., "main[3]")."""
        return f"{self.deck.value}[{self.index + 1}]"

    def occupy(self, uld_id: str, weight_share_kg: float) -> None:
        """Mark the slot as holding a ULD's weight share."""
        if self.occupied:
            raise ValueError(f"Slot {self.label} already holds {self.occupant_id}")
        self.occupied = True
        self.occupant_id = uld_id
        self.occupant_weight_kg = weight_share_kg
