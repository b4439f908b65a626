"""
Week/day layout of commit counts.

Offsets are grouped seven at a time: offset ``k`` lands in week ``k // 7`` at
day ``k % 7``, with week 0 the most recent.
"""

from typing import Dict, Iterable, List, Mapping

Column = List[int]
Grid = Dict[int, Column]


def sorted_offsets(counts: Mapping[int, int]) -> List[int]:
    """Offsets of ``counts`` in ascending order."""
    return sorted(counts)


def build_columns(offsets: Iterable[int], counts: Mapping[int, int]) -> Grid:
    """
    Group day counts into week columns.

    A column restarts on day 0 and is stored once day 6 is reached, so a
    week that is cut off before its seventh day is left out.
    """
    grid: Grid = {}
    column: Column = []

    for k in offsets:
        week, day = divmod(k, 7)

        if day == 0:
            column = []

        column.append(counts[k])

        if day == 6:
            grid[week] = column

    return grid


def build_grid(counts: Mapping[int, int]) -> Grid:
    return build_columns(sorted_offsets(counts), counts)
