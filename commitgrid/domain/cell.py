"""
Heatmap cell domain object for commitgrid.

A Cell is derived while rendering and never persisted.
"""

from dataclasses import dataclass
from enum import Enum


class CellCategory(Enum):
    """Shade bucket of a day's commit count."""
    EMPTY = "empty"
    LIGHT = "light"
    MEDIUM = "medium"
    DARK = "dark"


def cell_category(value: int) -> CellCategory:
    """Map a commit count onto its shade: 0, 1-4, 5-9, 10 and up."""
    if value <= 0:
        return CellCategory.EMPTY
    if value < 5:
        return CellCategory.LIGHT
    if value < 10:
        return CellCategory.MEDIUM
    return CellCategory.DARK


@dataclass(frozen=True)
class Cell:
    """One day of the grid."""
    value: int
    is_today: bool = False

    @property
    def category(self) -> CellCategory:
        return cell_category(self.value)

    @property
    def text(self) -> str:
        """Fixed four-character field; wider numbers eat the left padding."""
        if self.value == 0:
            return "  - "
        if self.value >= 100:
            return f"{self.value} "
        if self.value >= 10:
            return f" {self.value} "
        return f"  {self.value} "
