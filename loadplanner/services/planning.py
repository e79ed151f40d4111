"""
Load Planning Service.

Builds the slot pool for an aircraft, runs the placement engine over the
submitted ULDs and returns the final load plan snapshot.
"""

import logging
from collections.abc import Iterable

from loadplanner.config import PlannerSettings
from loadplanner.domain import (
    AIRCRAFT_PROFILES,
    DEFAULT_ULD_CATALOG,
    AircraftProfile,
    CatalogEntry,
    DeckName,
    LoadPlanResult,
    ULDRequest,
)

from .placement import PlacementEngine
from .slot_pool import SlotPool
from .width import WidthResolver

logger = logging.getLogger(__name__)


class LoadPlanningService:
    """
    Service for planning ULD loads on an aircraft.

    The balance target is resolved in order: explicit argument, aircraft
    profile `target_arm`, settings `target_arm`, then the mean arm of all slots.

    Usage:
        service = LoadPlanningService()
        result = service.plan("B757-200PCF", ulds)
    """

    def __init__(
        self,
        catalog: Iterable[CatalogEntry] | None = None,
        aircraft: dict[str, AircraftProfile] | None = None,
        settings: PlannerSettings | None = None,
    ):
        self.settings = settings or PlannerSettings()
        self.width_resolver = WidthResolver(DEFAULT_ULD_CATALOG if catalog is None else catalog)
        self.aircraft = dict(AIRCRAFT_PROFILES if aircraft is None else aircraft)

    @property
    def catalog(self) -> tuple[CatalogEntry, ...]:
        return self.width_resolver.catalog

    def get_aircraft(self, model: str) -> AircraftProfile:
        """Get an aircraft profile by model name."""
        if model not in self.aircraft:
            available = sorted(self.aircraft.keys())
            raise ValueError(f"Unknown aircraft model: {model}. Available: {available}")
        return self.aircraft[model]

    def build_pool(self, aircraft: AircraftProfile) -> SlotPool:
        """Create a fresh slot pool for an aircraft."""
        return SlotPool.from_aircraft(aircraft, self.settings)

    def resolve_target_arm(
        self,
        aircraft: AircraftProfile,
        pool: SlotPool,
        target_arm: float | None = None,
    ) -> float:
        """Pick the balance reference arm for a planning run."""
        for candidate in (target_arm, aircraft.target_arm, self.settings.target_arm):
            if candidate is not None:
                return candidate
        return pool.mean_arm()

    def plan(
        self,
        aircraft: AircraftProfile | str,
        ulds: Iterable[ULDRequest],
        target_arm: float | None = None,
    ) -> LoadPlanResult:
        """
        Assign ULDs to slots on an aircraft.

        Args:
            aircraft: Aircraft profile or registered model name
            ulds: ULDs in loading order
            target_arm: Optional fixed balance reference arm

        Returns:
            LoadPlanResult with final deck state and assignment ledger
        """
        if isinstance(aircraft, str):
            aircraft = self.get_aircraft(aircraft)

        pool = self.build_pool(aircraft)
        target = self.resolve_target_arm(aircraft, pool, target_arm)
        engine = PlacementEngine(pool, self.width_resolver, target_arm=target)
        ledger = engine.place_all(ulds)

        result = LoadPlanResult(
            aircraft_model=aircraft.model,
            target_arm=target,
            main_deck=pool.snapshot(DeckName.MAIN),
            lower_deck=pool.snapshot(DeckName.LOWER),
            main_row_length=aircraft.main_deck.row_length,
            lower_row_length=aircraft.lower_deck.row_length,
            assignments=list(ledger.records),
            total_weight_kg=ledger.total_weight_kg,
            total_moment=ledger.total_moment,
        )
        logger.info(
            "Planned %s: %d placed, %d unassigned, %.1f kg",
            aircraft.model, result.placed_count, result.unassigned_count, result.total_weight_kg,
        )
        return result
