"""
Domain models for the ULD Load Planner.

Core business entities for cargo deck load planning.
All models use Pydantic for validation and serialization.
"""

from .uld import ULDRequest, DeckAffinity, CatalogEntry, DEFAULT_ULD_CATALOG
from .aircraft import AircraftProfile, DeckProfile, DeckName, AIRCRAFT_PROFILES
from .slot import Slot, SlotClass
from .plan import AssignmentRecord, PlacementOutcome, LoadPlanResult

__all__ = [
    # ULD
    "ULDRequest",
    "DeckAffinity",
    "CatalogEntry",
    "DEFAULT_ULD_CATALOG",
    # Aircraft
    "AircraftProfile",
    "DeckProfile",
    "DeckName",
    "AIRCRAFT_PROFILES",
    # Slot
    "Slot",
    "SlotClass",
    # Plan
    "AssignmentRecord",
    "PlacementOutcome",
    "LoadPlanResult",
]
