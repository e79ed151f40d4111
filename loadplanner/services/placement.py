"""
ULD Placement Engine.

Greedy, single-pass assignment of ULDs to contiguous deck slots, keeping the
loaded centre of gravity as close as possible to a target balance arm.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from loadplanner.domain import AssignmentRecord, DeckAffinity, DeckName, Slot, ULDRequest

from .ledger import AssignmentLedger
from .slot_pool import SlotPool
from .width import WidthResolver

logger = logging.getLogger(__name__)

AFFINITY_DECKS = {
    DeckAffinity.MAIN: (DeckName.MAIN,),
    DeckAffinity.LOWER: (DeckName.LOWER,),
    DeckAffinity.ANY: (DeckName.MAIN, DeckName.LOWER),
}


@dataclass(frozen=True)
class CandidateRun:
    """A run of index-contiguous free slots on one deck."""

    deck: DeckName
    start_index: int
    arms: tuple[float, ...]

    @property
    def indices(self) -> list[int]:
        return list(range(self.start_index, self.start_index + len(self.arms)))


class PlacementEngine:
    """
    Assigns ULDs to deck slots in input order.

    For each ULD:
    - Resolve its width from the catalog
    - Enumerate every run of `width` eligible, index-contiguous free slots on one deck
    - Score each run by the deviation of the resulting CG arm from the target arm
    - Commit the best run (first found on ties), or record the ULD as unassigned

    Placements are never revisited: a ULD that could have fit had an earlier
    one been placed elsewhere stays unassigned.

    Usage:
        engine = PlacementEngine(pool, WidthResolver(DEFAULT_ULD_CATALOG))
        ledger = engine.place_all(ulds)
    """

    def __init__(
        self,
        pool: SlotPool,
        width_resolver: WidthResolver | None = None,
        target_arm: float | None = None,
    ):
        self.pool = pool
        self.width_resolver = width_resolver or WidthResolver()
        self.target_arm = target_arm if target_arm is not None else pool.mean_arm()
        self.ledger = AssignmentLedger()

    def _is_eligible(self, uld: ULDRequest, slot: Slot) -> bool:
        if not slot.is_free:
            return False
        if slot.is_restricted and not uld.allow_restricted:
            return False
        return True

    def candidate_runs(self, uld: ULDRequest, width: int) -> list[CandidateRun]:
        """
        Enumerate runs of eligible slots for a ULD.

        Runs are produced deck by deck (main, then lower) in ascending start index.
        """
        runs = []
        for deck in AFFINITY_DECKS[uld.affinity]:
            slots = self.pool.slots(deck)
            eligible = [self._is_eligible(uld, s) for s in slots]
            for start in range(len(slots) - width + 1):
                if all(eligible[start:start + width]):
                    runs.append(
                        CandidateRun(
                            deck=deck,
                            start_index=start,
                            arms=tuple(s.arm for s in slots[start:start + width]),
                        )
                    )
        return runs

    def score_run(self, uld: ULDRequest, run: CandidateRun) -> float:
        """Absolute deviation of the CG arm from the target if the ULD took this run."""
        total_weight = self.ledger.total_weight_kg + uld.weight_kg
        if total_weight == 0:
            # Nothing weighs anything yet; compare the run's own mean arm
            cg_arm = sum(run.arms) / len(run.arms)
        else:
            share = uld.weight_kg / len(run.arms)
            moment = self.ledger.total_moment + sum(share * arm for arm in run.arms)
            cg_arm = moment / total_weight
        return abs(cg_arm - self.target_arm)

    def best_run(self, uld: ULDRequest, width: int) -> CandidateRun | None:
        """Get the lowest scoring run, keeping the earliest on ties."""
        best = None
        best_score = float("inf")
        for run in self.candidate_runs(uld, width):
            score = self.score_run(uld, run)
            if score < best_score:
                best_score = score
                best = run
        return best

    def place(self, uld: ULDRequest) -> AssignmentRecord:
        """Place a single ULD and record the outcome."""
        width = self.width_resolver.resolve(uld.uld_id)
        run = self.best_run(uld, width)

        if run is None:
            logger.info(
                "No %d-slot run available for %s (affinity=%s, restricted=%s)",
                width, uld.uld_id, uld.affinity.value, uld.allow_restricted,
            )
            return self.ledger.record_unassigned(uld, width)

        indices = run.indices
        self.pool.occupy(run.deck, indices, uld.uld_id, uld.weight_kg / width)
        record = self.ledger.record_placement(
            uld,
            width,
            run.deck,
            indices,
            moment_arm=run.arms[0],
        )
        logger.debug("Placed %s at %s", uld.uld_id, record.position)
        return record

    def place_all(self, ulds: Iterable[ULDRequest]) -> AssignmentLedger:
        """Place ULDs strictly in the given order."""
        for uld in ulds:
            self.place(uld)
        return self.ledger
