"""
Assignment ledger.

Append-only record of placement outcomes with running weight and moment.
"""

from loadplanner.domain import AssignmentRecord, DeckName, PlacementOutcome, ULDRequest


class AssignmentLedger:
    """Running aggregate of a planning run."""

    def __init__(self):
        self._records: list[AssignmentRecord] = []
        self.total_weight_kg = 0.0
        self.total_moment = 0.0

    @property
    def records(self) -> tuple[AssignmentRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def record_placement(
        self,
        uld: ULDRequest,
        width: int,
        deck: DeckName,
        slot_indices: list[int],
        moment_arm: float,
    ) -> AssignmentRecord:
        """Record a placed ULD and add its weight and moment."""
        record = AssignmentRecord(
            uld_id=uld.uld_id,
            weight_kg=uld.weight_kg,
            width_slots=width,
            outcome=PlacementOutcome.PLACED,
            deck=deck,
            start_index=slot_indices[0],
            slot_indices=slot_indices,
        )
        self._records.append(record)
        self.total_weight_kg += uld.weight_kg
        self.total_moment += uld.weight_kg * moment_arm
        return record

    def record_unassigned(self, uld: ULDRequest, width: int) -> AssignmentRecord:
        """Record a ULD that could not be placed."""
        record = AssignmentRecord(
            uld_id=uld.uld_id,
            weight_kg=uld.weight_kg,
            width_slots=width,
            outcome=PlacementOutcome.UNASSIGNED,
        )
        self._records.append(record)
        return record
