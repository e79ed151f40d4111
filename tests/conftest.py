"""Pytest fixtures for ULD Load Planner tests."""

import pytest

from loadplanner.api.dependencies import AppState
from loadplanner.config import PlannerSettings
from loadplanner.domain import (
    AircraftProfile,
    CatalogEntry,
    DeckAffinity,
    DeckProfile,
    ULDRequest,
)
from loadplanner.services import LoadPlanningService, SlotPool, WidthResolver


@pytest.fixture
def settings() -> PlannerSettings:
    """Default planner settings."""
    return PlannerSettings()


@pytest.fixture
def test_catalog() -> list[CatalogEntry]:
    """Small catalog with one- to four-slot units."""
    return [
        CatalogEntry(prefix="W4", uld_type="WIDE4", width_slots=4),
        CatalogEntry(prefix="W2", uld_type="WIDE2", width_slots=2),
        CatalogEntry(prefix="AKE", uld_type="LD3", width_slots=1, deck=DeckAffinity.LOWER),
    ]


@pytest.fixture
def resolver(test_catalog) -> WidthResolver:
    """Width resolver over the test catalog."""
    return WidthResolver(test_catalog)


@pytest.fixture
def five_slot_aircraft() -> AircraftProfile:
    """Single main deck, five slots with arms 10-50, default nose/tail slots."""
    return AircraftProfile(
        model="TEST-5",
        main_deck=DeckProfile(slots=5, slot_arms=[10.0, 20.0, 30.0, 40.0, 50.0]),
    )


@pytest.fixture
def open_four_slot_aircraft() -> AircraftProfile:
    """Single main deck, four slots, no restricted positions."""
    return AircraftProfile(
        model="TEST-4",
        main_deck=DeckProfile(
            slots=4,
            slot_arms=[10.0, 20.0, 30.0, 40.0],
            fore_restricted=0,
            aft_restricted=0,
        ),
    )


@pytest.fixture
def two_deck_aircraft() -> AircraftProfile:
    """Main and lower deck with regenerated arms and default nose/tail slots."""
    return AircraftProfile(
        model="TEST-2D",
        mtw_kg=40000,
        main_deck=DeckProfile(slots=8, row_length=3),
        lower_deck=DeckProfile(slots=6, row_length=3),
    )


@pytest.fixture
def five_slot_pool(five_slot_aircraft, settings) -> SlotPool:
    """Slot pool for the five slot aircraft."""
    return SlotPool.from_aircraft(five_slot_aircraft, settings)


@pytest.fixture
def planning_service(test_catalog) -> LoadPlanningService:
    """Planning service over the test catalog and built-in aircraft."""
    return LoadPlanningService(catalog=test_catalog)


@pytest.fixture
def sample_ulds() -> list[ULDRequest]:
    """Mixed ULD requests."""
    return [
        ULDRequest(uld_id="W2-001", weight_kg=3000, affinity=DeckAffinity.MAIN),
        ULDRequest(uld_id="AKE001", weight_kg=700, affinity=DeckAffinity.LOWER),
        ULDRequest(uld_id="PMC001", weight_kg=1500, allow_restricted=False),
        ULDRequest(uld_id="AKE002", weight_kg=650, affinity=DeckAffinity.LOWER, allow_restricted=False),
        ULDRequest(uld_id="W2-002", weight_kg=2500, affinity=DeckAffinity.ANY),
    ]


@pytest.fixture(autouse=True)
def reset_app_state():
    """Start every test with a fresh API state."""
    AppState.reset()
    yield
    AppState.reset()
