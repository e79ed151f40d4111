"""
ULD catalog API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from loadplanner.api.dependencies import get_planning_service
from loadplanner.services import LoadPlanningService

router = APIRouter()


class CatalogEntryInfo(BaseModel):
    """Catalog entry response."""

    prefix: str
    uld_type: str
    width_slots: int
    deck: str
    notes: str


class CatalogList(BaseModel):
    """Catalog in match order."""

    entries: list[CatalogEntryInfo]
    total: int


class WidthResolution(BaseModel):
    """Width resolved for a ULD identifier."""

    uld_id: str
    width_slots: int
    matched_prefix: str | None = None
    uld_type: str | None = None


@router.get("/", response_model=CatalogList)
async def list_catalog(
    service: Annotated[LoadPlanningService, Depends(get_planning_service)],
):
    """List catalog entries in the order they are matched."""
    entries = [
        CatalogEntryInfo(
            prefix=e.prefix,
            uld_type=e.uld_type,
            width_slots=e.width_slots,
            deck=e.deck.value,
            notes=e.notes,
        )
        for e in service.catalog
    ]
    return CatalogList(entries=entries, total=len(entries))


@router.get("/resolve/{uld_id}", response_model=WidthResolution)
async def resolve_width(
    uld_id: str,
    service: Annotated[LoadPlanningService, Depends(get_planning_service)],
):
    """
    Resolve the slot width of a ULD identifier.

    Unknown identifiers occupy a single slot.
    """
    entry = service.width_resolver.lookup(uld_id)
    return WidthResolution(
        uld_id=uld_id,
        width_slots=service.width_resolver.resolve(uld_id),
        matched_prefix=entry.prefix if entry else None,
        uld_type=entry.uld_type if entry else None,
    )
