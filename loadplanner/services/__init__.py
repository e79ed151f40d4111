"""
Core services for the ULD Load Planner.

Business logic layer containing:
- Width: ULD slot width resolution from the catalog
- Slot pool: deck slots, balance arms and restricted positions
- Placement: greedy contiguous-slot assignment
- Ledger: assignment outcomes with running weight and moment
- Planning: end-to-end load planning for an aircraft
"""

from .width import WidthResolver
from .slot_pool import SlotPool, generate_default_arms
from .ledger import AssignmentLedger
from .placement import PlacementEngine, CandidateRun
from .planning import LoadPlanningService

__all__ = [
    "WidthResolver",
    "SlotPool",
    "generate_default_arms",
    "AssignmentLedger",
    "PlacementEngine",
    "CandidateRun",
    "LoadPlanningService",
]
