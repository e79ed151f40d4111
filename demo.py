#!/usr/bin/env python3
"""
ULD Load Planner Demo.

Demonstrates the core capabilities:
1. Aircraft deck geometry
2. ULD width resolution
3. Greedy load planning
4. Text report and deck layouts
"""

import logging

from loadplanner.config import get_settings, init_logging
from loadplanner.data.synthetic import ULDRequestGenerator
from loadplanner.domain import DeckAffinity, DeckName, ULDRequest
from loadplanner.reports import build_load_plan_lines, build_load_plan_text, save_load_plan
from loadplanner.services import LoadPlanningService

logger = logging.getLogger(__name__)


def print_section(title: str):
    """Print a section header."""
    print()
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)


def main():
    settings = get_settings()
    init_logging(settings)

    print()
    print("*" * 60)
    print("*               ULD Load Planner Demo                     *")
    print("*" * 60)

    service = LoadPlanningService(settings=settings)
    aircraft = service.get_aircraft("B757-200PCF")

    # 1. Aircraft
    print_section("1. Aircraft Deck Geometry")

    pool = service.build_pool(aircraft)
    print(f"Aircraft: {aircraft.model} (MTW {aircraft.mtw_kg} kg)")
    for deck in DeckName:
        slots = pool.slots(deck)
        if slots:
            print(f"  {deck.value:5}: {len(slots):2d} slots, arms {slots[0].arm:.1f} - {slots[-1].arm:.1f}")
    print(f"Mean arm: {pool.mean_arm():.2f}")

    # 2. Width resolution
    print_section("2. ULD Width Resolution")

    for uld_id in ["AKE12345XX", "ALF20001XX", "PGA30001XX", "XYZ00001XX"]:
        print(f"  {uld_id}: {service.width_resolver.resolve(uld_id)} slot(s)")

    # 3. Planning
    print_section("3. Load Planning")

    ulds = [
        ULDRequest(uld_id="PGA10001XX", weight_kg=4200, affinity=DeckAffinity.MAIN, allow_restricted=False),
        ULDRequest(uld_id="PMC10002XX", weight_kg=1800, affinity=DeckAffinity.MAIN),
        ULDRequest(uld_id="AKE10003XX", weight_kg=650, affinity=DeckAffinity.LOWER),
    ]
    ulds += ULDRequestGenerator(seed=42).generate(12)

    result = service.plan(aircraft, ulds)
    print(f"Placed: {result.placed_count}, Unassigned: {result.unassigned_count}")
    print(f"Total weight: {result.total_weight_kg:,.0f} kg")
    if result.cg_arm is not None:
        print(f"CG arm: {result.cg_arm:.2f} (target {result.target_arm:.2f})")

    # 4. Report
    print_section("4. Load Plan Report")

    print(build_load_plan_text(result, service.width_resolver))

    try:
        path = save_load_plan(build_load_plan_lines(result, service.width_resolver), settings.report_path)
        print(f"\nLoad plan saved to {path}")
    except OSError as e:
        logger.error("Failed to save load plan: %s", e)

    print()
    print("=" * 60)
    print("  Demo Complete!")
    print("=" * 60)
    print()
    print("To run the API server:")
    print("  uvicorn loadplanner.api:app --reload")
    print()
    print("API Documentation at: http://localhost:8000/docs")
    print()


if __name__ == "__main__":
    main()
