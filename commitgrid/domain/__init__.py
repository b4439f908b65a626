"""
Domain layer for commitgrid.

Contains pure domain objects with no I/O or side effects:
- StatsWindow: Lookback window and day-offset arithmetic
- CommitRecord: Author email and timestamp of one commit
- Cell: Rendered day of the heatmap
- OperationDetail/OperationSummary: Per-repository outcomes
"""

from .window import StatsWindow, OUT_OF_RANGE, beginning_of_day
from .commit import CommitRecord
from .cell import Cell, CellCategory, cell_category
from .operation import OperationStatus, OperationDetail, OperationSummary

__all__ = [
    'StatsWindow',
    'OUT_OF_RANGE',
    'beginning_of_day',
    'CommitRecord',
    'Cell',
    'CellCategory',
    'cell_category',
    'OperationStatus',
    'OperationDetail',
    'OperationSummary',
]
