"""
Load planning API endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field, model_validator

from loadplanner.api.dependencies import get_planning_service
from loadplanner.domain import AircraftProfile, LoadPlanResult, ULDRequest
from loadplanner.reports import build_load_plan_text
from loadplanner.services import LoadPlanningService

router = APIRouter()


class PlanRequest(BaseModel):
    """
    Request to plan a load.

    Either a registered aircraft model or an inline aircraft profile.
    ULDs are placed in the order given.
    """

    aircraft_model: str | None = None
    aircraft: AircraftProfile | None = None
    ulds: list[ULDRequest] = Field(default_factory=list)
    target_arm: float | None = None

    @model_validator(mode="after")
    def check_aircraft(self) -> "PlanRequest":
        if (self.aircraft_model is None) == (self.aircraft is None):
            raise ValueError("Provide exactly one of aircraft_model or aircraft")
        return self


def _run_plan(request: PlanRequest, service: LoadPlanningService) -> LoadPlanResult:
    aircraft = request.aircraft
    if aircraft is None:
        try:
            aircraft = service.get_aircraft(request.aircraft_model)
        except ValueError:
            raise HTTPException(
                status_code=404,
                detail=f"Aircraft {request.aircraft_model} not found",
            )
    return service.plan(aircraft, request.ulds, target_arm=request.target_arm)


@router.post("/", response_model=LoadPlanResult)
async def create_plan(
    request: PlanRequest,
    service: Annotated[LoadPlanningService, Depends(get_planning_service)],
):
    """
    Plan a ULD load.

    Returns the final deck state, one assignment record per ULD and the
    resulting weight, moment and CG arm. ULDs that do not fit are reported as
    unassigned rather than rejected.
    """
    return _run_plan(request, service)


@router.post("/report", response_class=PlainTextResponse)
async def create_plan_report(
    request: PlanRequest,
    service: Annotated[LoadPlanningService, Depends(get_planning_service)],
):
    """Plan a ULD load and return the text report with deck layouts."""
    result = _run_plan(request, service)
    return build_load_plan_text(result, service.width_resolver)
