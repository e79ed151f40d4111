"""
Text report builder for a load plan.

Produces the assignment results table and an ASCII layout of each deck.
"""

import logging
from pathlib import Path

import pandas as pd

from loadplanner.domain import DeckName, LoadPlanResult, Slot, SlotClass
from loadplanner.services import WidthResolver

logger = logging.getLogger(__name__)

BOX_WIDTH = 11
MAX_ROW_SLOTS = 3


def assignments_frame(result: LoadPlanResult) -> pd.DataFrame:
    """Assignment results as a DataFrame, one row per ULD in loading order."""
    return pd.DataFrame(
        [
            {
                "ULD ID": a.uld_id,
                "Assigned Slot": a.position,
                "Width": a.width_slots,
                "Weight(kg)": a.weight_kg,
            }
            for a in result.assignments
        ],
        columns=["ULD ID", "Assigned Slot", "Width", "Weight(kg)"],
    )


def format_assignment_table(result: LoadPlanResult) -> str:
    """Render the assignment results table."""
    frame = assignments_frame(result)
    if frame.empty:
        return "No ULDs submitted."
    return frame.to_string(index=False)


def _layout_rows(slots: list[Slot]) -> list[list[Slot]]:
    """Nose slot alone, then rows of up to three, then the tail slot alone."""
    if not slots:
        return []
    rows = [[slots[0]]]
    idx = 1
    while idx < len(slots) - 1:
        size = min(MAX_ROW_SLOTS, len(slots) - 1 - idx)
        rows.append(slots[idx:idx + size])
        idx += size
    if idx < len(slots):
        rows.append([slots[-1]])
    return rows


def _cell(text: str) -> str:
    return "|" + text[:BOX_WIDTH - 2].ljust(BOX_WIDTH - 1)


def _id_text(slot: Slot, resolver: WidthResolver | None) -> str:
    if slot.occupied:
        uld_type = resolver.type_label(slot.occupant_id) if resolver else ""
        return slot.occupant_id + (f"[{uld_type}]" if uld_type else "")
    if slot.slot_class == SlotClass.FORE_RESTRICTED:
        return "  N  "
    if slot.slot_class == SlotClass.AFT_RESTRICTED:
        return "  T  "
    return " "


def render_deck_layout(
    deck: DeckName,
    slots: list[Slot],
    row_length: int = 8,
    resolver: WidthResolver | None = None,
) -> list[str]:
    """
    Render one deck as ASCII boxes.

    Each box shows the occupant (with catalog type), the 1-based slot number and
    the occupant's weight share. Free nose/tail slots are marked N / T.
    """
    lines = ["", f"=== {deck.value.capitalize()} Deck Load Plan (slots={len(slots)}) ==="]

    for row in _layout_rows(slots):
        pad = " " * max(0, (row_length * BOX_WIDTH - BOX_WIDTH * len(row)) // 2)
        border = pad + "".join("+" + "-" * (BOX_WIDTH - 2) for _ in row) + "+"

        lines.append(border)
        lines.append(pad + "".join(_cell(_id_text(s, resolver)) for s in row) + "|")
        lines.append(pad + "".join(_cell(f"#{s.index + 1}") for s in row) + "|")
        lines.append(
            pad
            + "".join(_cell(str(int(s.occupant_weight_kg)) if s.occupied else "") for s in row)
            + "|"
        )
        lines.append(border)

    return lines


def build_load_plan_lines(result: LoadPlanResult, resolver: WidthResolver | None = None) -> list[str]:
    """Both deck layouts, main deck first."""
    return render_deck_layout(
        DeckName.MAIN, result.main_deck, result.main_row_length, resolver
    ) + render_deck_layout(
        DeckName.LOWER, result.lower_deck, result.lower_row_length, resolver
    )


def build_load_plan_text(result: LoadPlanResult, resolver: WidthResolver | None = None) -> str:
    """Full report: summary, assignment results and deck layouts."""
    lines: list[str] = []
    lines.append(f"Aircraft: {result.aircraft_model}")
    lines.append(f"Target arm: {result.target_arm:.2f}")
    lines.append(f"Total weight: {result.total_weight_kg:.1f} kg")
    if result.cg_arm is not None:
        lines.append(f"CG arm: {result.cg_arm:.2f}")
    lines.append(f"Placed: {result.placed_count}  Unassigned: {result.unassigned_count}")
    lines.append("")
    lines.append("=== Assignment Results ===")
    lines.append(format_assignment_table(result))
    lines.extend(build_load_plan_lines(result, resolver))
    return "\n".join(lines)


def save_load_plan(lines: list[str], path: str | Path) -> Path:
    """Write report lines to a text file."""
    path = Path(path)
    path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
    logger.info("Load plan saved to %s", path)
    return path
