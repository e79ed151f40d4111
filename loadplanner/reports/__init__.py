"""Text reports for load plans."""

from .text_report import (
    assignments_frame,
    format_assignment_table,
    render_deck_layout,
    build_load_plan_lines,
    build_load_plan_text,
    save_load_plan,
)

__all__ = [
    "assignments_frame",
    "format_assignment_table",
    "render_deck_layout",
    "build_load_plan_lines",
    "build_load_plan_text",
    "save_load_plan",
]
