"""
Aircraft API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from loadplanner.api.dependencies import get_planning_service
from loadplanner.domain import AircraftProfile, DeckName
from loadplanner.services import LoadPlanningService

router = APIRouter()


class DeckInfo(BaseModel):
    """Deck geometry as used for planning."""

    slots: int
    row_length: int
    arms: list[float]
    restricted: list[str]


class AircraftInfo(BaseModel):
    """Aircraft information response."""

    model: str
    mtw_kg: int
    total_slots: int
    mean_arm: float
    target_arm: float | None
    decks: dict[str, DeckInfo]


class AircraftList(BaseModel):
    """List of aircraft."""

    aircraft: list[str]
    total: int


def _aircraft_info(profile: AircraftProfile, service: LoadPlanningService) -> AircraftInfo:
    pool = service.build_pool(profile)
    decks = {}
    for name in DeckName:
        slots = pool.slots(name)
        decks[name.value] = DeckInfo(
            slots=len(slots),
            row_length=profile.deck(name).row_length,
            arms=[s.arm for s in slots],
            restricted=[s.slot_class.value for s in slots],
        )
    return AircraftInfo(
        model=profile.model,
        mtw_kg=profile.mtw_kg,
        total_slots=profile.total_slots,
        mean_arm=pool.mean_arm(),
        target_arm=profile.target_arm,
        decks=decks,
    )


@router.get("/", response_model=AircraftList)
async def list_aircraft(
    service: Annotated[LoadPlanningService, Depends(get_planning_service)],
):
    """List registered aircraft models."""
    models = sorted(service.aircraft.keys())
    return AircraftList(aircraft=models, total=len(models))


@router.get("/{model}", response_model=AircraftInfo)
async def get_aircraft(
    model: str,
    service: Annotated[LoadPlanningService, Depends(get_planning_service)],
):
    """
    Get deck geometry for an aircraft.

    Arms are shown after regeneration, restriction classes after the nose/tail default.
    """
    try:
        profile = service.get_aircraft(model)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Aircraft {model} not found")

    return _aircraft_info(profile, service)
