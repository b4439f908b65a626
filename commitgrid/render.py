"""
Rendering functions for commitgrid output.

This module draws the contribution grid as colored text.
Services return counts and columns; this module makes them human-readable.
"""

from datetime import timedelta
from typing import Optional

from rich.console import Console
from rich.text import Text

from .domain import Cell, CellCategory, StatsWindow
from .grid import Grid

console = Console()

MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

CELL_STYLES = {
    CellCategory.EMPTY: "black",
    CellCategory.LIGHT: "bold black on white",
    CellCategory.MEDIUM: "bold black on yellow",
    CellCategory.DARK: "bold black on green",
}
TODAY_STYLE = "bold white on magenta"

# Row 0 is Sunday; only every other weekday is labelled
DAY_LABELS = {1: " Mon ", 3: " Wed ", 5: " Fri "}
BLANK_LABEL = "     "


def cell_style(cell: Cell) -> str:
    """Rich style for a cell; today's cell ignores its shade."""
    if cell.is_today:
        return TODAY_STYLE
    return CELL_STYLES[cell.category]


def format_cell(value: int, today: bool = False) -> Text:
    cell = Cell(value=value, is_today=today)
    return Text(cell.text, style=cell_style(cell))


def day_label(day: int) -> str:
    return DAY_LABELS.get(day, BLANK_LABEL)


class GridRenderer:
    """
    Draws a contribution grid.

    Example:
        renderer = GridRenderer(StatsWindow())
        renderer.render(build_grid(counts))
    """

    def __init__(self, window: StatsWindow, output: Optional[Console] = None):
        self.window = window
        self.console = output or console

    def months_header(self) -> Text:
        """
        Month labels above the grid, one per calendar-month change.

        Walks week by week from the window start until past now.
        """
        header = Text("         ")
        week = self.window.start
        month = week.month

        while True:
            if week.month != month:
                header.append(f"{MONTH_ABBR[week.month - 1]} ")
                month = week.month
            else:
                header.append("    ")

            week += timedelta(days=7)
            if week > self.window.now:
                break

        return header

    def row(self, day: int, grid: Grid) -> Text:
        """One weekday across every week, oldest week first."""
        line = Text(day_label(day))
        today_row = self.window.today_offset - 1

        for week in range(self.window.weeks + 1, -1, -1):
            column = grid.get(week)
            if column is None:
                line.append_text(format_cell(0))
            elif week == 0 and day == today_row:
                value = column[day] if len(column) > day else 0
                line.append_text(format_cell(value, today=True))
            elif len(column) > day:
                line.append_text(format_cell(column[day]))
            else:
                line.append_text(format_cell(0))

        return line

    def render(self, grid: Grid) -> None:
        """Print the month header followed by rows Saturday down to Sunday."""
        self.console.print(self.months_header(), soft_wrap=True, highlight=False)
        for day in range(6, -1, -1):
            self.console.print(self.row(day, grid), soft_wrap=True, highlight=False)


def render_registry(paths, title: str = "Registered repositories") -> None:
    """List registry paths, one per line."""
    if not paths:
        console.print("[yellow]No repositories registered.[/yellow]")
        return

    console.print(f"[bold magenta]{title}[/bold magenta] ({len(paths)})")
    for path in paths:
        console.print(Text(f"  {path}", style="cyan"), soft_wrap=True, highlight=False)
