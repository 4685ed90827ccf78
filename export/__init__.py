"""Export module: terminal rendering (rich) of the slot grid and term dates."""

from export.tui_renderer import (
    render_grid_rows,
    render_slot_date_rows,
    render_term_rows,
)

__all__ = ["render_grid_rows", "render_slot_date_rows", "render_term_rows"]
