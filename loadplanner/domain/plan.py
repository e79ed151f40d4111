"""
Load plan domain models.

Outcome records produced by the placement engine and the final plan snapshot
handed to reporting and the API.
"""

from enum import Enum

from pydantic import BaseModel, Field, computed_field

from .aircraft import DeckName
from .slot import Slot


class PlacementOutcome(str, Enum):
    """Result of placing a single ULD."""

    PLACED = "placed"
    UNASSIGNED = "unassigned"


class AssignmentRecord(BaseModel):
    """Outcome of a single ULD in the planning run."""

    uld_id: str
    weight_kg: float
    width_slots: int = Field(ge=1)
    outcome: PlacementOutcome
    deck: DeckName | None = None
    start_index: int | None = None
    slot_indices: list[int] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def is_placed(self) -> bool:
        return self.outcome == PlacementOutcome.PLACED

    @computed_field
    @property
    def position(self) -> str:
        """Assigned position, 1-based (e.g., "lower[2]"), or UNASSIGNED."""
        if not self.is_placed:
            return "UNASSIGNED"
        return f"{self.deck.value}[{self.start_index + 1}]"


class LoadPlanResult(BaseModel):
    """
    Complete load plan for an aircraft.

    Snapshot of the final deck state and the assignment ledger.
    """

    aircraft_model: str
    target_arm: float
    main_deck: list[Slot] = Field(default_factory=list)
    lower_deck: list[Slot] = Field(default_factory=list)
    main_row_length: int = 8
    lower_row_length: int = 8
    assignments: list[AssignmentRecord] = Field(default_factory=list)
    total_weight_kg: float = 0.0
    total_moment: float = 0.0

    model_config = {"frozen": True}

    @computed_field
    @property
    def cg_arm(self) -> float | None:
        """Loaded centre of gravity arm (moment / weight)."""
        if self.total_weight_kg == 0:
            return None
        return self.total_moment / self.total_weight_kg

    @computed_field
    @property
    def placed_count(self) -> int:
        return sum(1 for a in self.assignments if a.is_placed)

    @computed_field
    @property
    def unassigned_count(self) -> int:
        return len(self.assignments) - self.placed_count

    def deck_slots(self, deck: DeckName) -> list[Slot]:
        """Get final slot state of a deck in index order."""
        return self.main_deck if deck == DeckName.MAIN else self.lower_deck

    def unassigned(self) -> list[AssignmentRecord]:
        """ULDs that could not be placed."""
        return [a for a in self.assignments if not a.is_placed]
