"""
API dependencies.

Provides dependency injection for FastAPI routes.
"""

import logging

from loadplanner.config import PlannerSettings, get_settings
from loadplanner.data import load_aircraft_db, load_catalog
from loadplanner.domain import AIRCRAFT_PROFILES, DEFAULT_ULD_CATALOG
from loadplanner.services import LoadPlanningService

logger = logging.getLogger(__name__)


class AppState:
    """Application state container."""

    _instance: "AppState | None" = None

    def __init__(self, settings: PlannerSettings | None = None):
        self.settings = settings or get_settings()

        catalog = DEFAULT_ULD_CATALOG
        if self.settings.catalog_path:
            catalog = load_catalog(self.settings.catalog_path)

        aircraft = dict(AIRCRAFT_PROFILES)
        if self.settings.aircraft_db_path:
            aircraft.update(load_aircraft_db(self.settings.aircraft_db_path))

        self.planning_service = LoadPlanningService(
            catalog=catalog,
            aircraft=aircraft,
            settings=self.settings,
        )

    @classmethod
    def get_instance(cls) -> "AppState":
        """Get or create singleton instance."""
        if cls._instance is None:
            cls._instance = AppState()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset singleton (for testing)."""
        cls._instance = None


def get_planning_service() -> LoadPlanningService:
    """Dependency for the load planning service."""
    return AppState.get_instance().planning_service
