"""termgrid — main CLI.

Usage:
  python main.py init                         Write the built-in term catalog
  python main.py terms                        List configured terms
  python main.py term [f22]                   Show one term
  python main.py slot Mon "9:00 AM"           Show a slot
  python main.py grid                         Show the weekly slot grid
  python main.py dates Mon "9:00 AM"          Dates of a slot in the current term
  python main.py dates Tue "1:00 PM" --term s23 --half first --list
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich import box

from models.slot import TIMESLOT_STRINGS, WEEKDAY_STRINGS, Slot

console = Console()


def _manager(ctx: click.Context):
    from config.manager import ConfigManager
    return ConfigManager(ctx.obj.get("config_path"))


def _slot_or_abort(day: str, time: str) -> Slot:
    """Looks up a slot by its labels or aborts with an error message."""
    if day not in WEEKDAY_STRINGS or time not in TIMESLOT_STRINGS[:-1]:
        console.print(
            f"[red]Unknown slot: {day} {time}[/red]\n"
            f"Days: {', '.join(WEEKDAY_STRINGS)}; "
            f"times: {TIMESLOT_STRINGS[0]} … {TIMESLOT_STRINGS[-2]}"
        )
        sys.exit(1)
    return Slot.from_day_string(day, time)


def _term_or_abort(ctx: click.Context, url_name: Optional[str]):
    try:
        return _manager(ctx).term(url_name)
    except (KeyError, ValueError, FileNotFoundError) as e:
        console.print(f"[red bold]Cannot load term:[/red bold] {escape(str(e))}")
        sys.exit(1)


# ─── INIT ─────────────────────────────────────────────────────────────────────

@click.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Overwrite an existing catalog.")
@click.pass_context
def cmd_init(ctx: click.Context, force: bool):
    """Writes the built-in term catalog to the config file."""
    from config.defaults import default_terms

    mgr = _manager(ctx)
    if not mgr.first_run_check() and not force:
        console.print(
            f"[yellow]A term catalog already exists: {mgr.DEFAULT_CONFIG}[/yellow]\n"
            "Use [bold]--force[/bold] to overwrite it."
        )
        return
    path = mgr.save(default_terms())
    console.print(f"[green]✓[/green] Term catalog saved: {path}")


# ─── TERMS ────────────────────────────────────────────────────────────────────

@click.command("terms")
@click.pass_context
def cmd_terms(ctx: click.Context):
    """Lists all configured terms."""
    from models.term import Term

    try:
        catalog = _manager(ctx).load_or_default()
    except ValueError as e:
        console.print(f"[red bold]Cannot load terms:[/red bold] {escape(str(e))}")
        sys.exit(1)

    table = Table(title="Terms", box=box.ROUNDED)
    table.add_column("URL", style="bold")
    table.add_column("Name")
    table.add_column("Catalog")
    table.add_column("Start")
    table.add_column("End")
    for tc in catalog.terms:
        term = Term.from_config(tc)
        marker = " *" if tc.url_name == catalog.current else ""
        table.add_row(
            term.url_name + marker, term.nice_name, term.catalog_name,
            tc.start_date or "—", tc.end_date or "—",
        )
    console.print(table)


@click.command("term")
@click.argument("url_name", required=False)
@click.pass_context
def cmd_term(ctx: click.Context, url_name: Optional[str]):
    """Shows one term (default: the current one)."""
    from export.tui_renderer import render_term_rows

    term = _term_or_abort(ctx, url_name)
    table = Table(title=f"{term.nice_name} ({term})", box=box.ROUNDED,
                  show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for row in render_term_rows(term):
        table.add_row(*row)
    console.print(table)


# ─── SLOTS ────────────────────────────────────────────────────────────────────

@click.command("slot")
@click.argument("day")
@click.argument("time")
def cmd_slot(day: str, time: str):
    """Shows the slot number and reference-week times of DAY TIME."""
    slot = _slot_or_abort(day, time)
    console.print(
        f"[bold]Slot {slot.index}[/bold]: {slot}  "
        f"(weekday {slot.weekday}, ends {slot.add(1).time_string})"
    )
    console.print(
        f"[dim]Reference week: {slot.start_date:%Y-%m-%d %H:%M} – "
        f"{slot.end_date:%H:%M}[/dim]"
    )


@click.command("grid")
@click.option("--mark", "marks", multiple=True, type=int,
              help="Slot number to highlight (repeatable).")
def cmd_grid(marks: tuple[int, ...]):
    """Shows the weekly grid of slot numbers."""
    from export.tui_renderer import render_grid_rows

    table = Table(title="Weekly slots", box=box.SIMPLE)
    table.add_column("Time", style="bold")
    for day in WEEKDAY_STRINGS:
        table.add_column(day, justify="right")
    for row in render_grid_rows(Slot.from_slot_number(m) for m in marks):
        table.add_row(*row)
    console.print(table)


@click.command("dates")
@click.argument("day")
@click.argument("time")
@click.option("--term", "url_name", default=None,
              help="Term url name, e.g. f22 (default: current term).")
@click.option("--half", type=click.Choice(["first", "second"]), default=None,
              help="Restrict to one half of the term.")
@click.option("--list", "list_all", is_flag=True, default=False,
              help="List every meeting.")
@click.pass_context
def cmd_dates(ctx: click.Context, day: str, time: str, url_name: Optional[str],
              half: Optional[str], list_all: bool):
    """Projects the slot DAY TIME onto the dates of a term."""
    from export.tui_renderer import fmt_datetime, render_slot_date_rows

    slot = _slot_or_abort(day, time)
    term = _term_or_abort(ctx, url_name)

    title = term.nice_name + (f", {half} half" if half else "")
    table = Table(title=title, box=box.ROUNDED, show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    for row in render_slot_date_rows(term, slot, half):
        table.add_row(*row)
    console.print(table)

    if list_all:
        for when in term.occurrences_for(
            slot, first_half=half == "first", second_half=half == "second"
        ):
            console.print(f"  {fmt_datetime(when)}")


# ─── MAIN CLI ─────────────────────────────────────────────────────────────────

@click.group()
@click.option("--config", "config_path", type=click.Path(path_type=Path),
              default=None, help="Path of the term catalog YAML.")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool):
    """Weekly class-slot grid and academic term calendar tool."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


def main():
    """Entry point."""
    cli(obj={})


cli.add_command(cmd_init)
cli.add_command(cmd_terms)
cli.add_command(cmd_term)
cli.add_command(cmd_slot)
cli.add_command(cmd_grid)
cli.add_command(cmd_dates)


if __name__ == "__main__":
    main()
