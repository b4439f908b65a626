"""
commitgrid - A contribution heatmap for local git repositories.

commitgrid finds the git repositories on your disk, remembers where they
are, and draws the last six months of your commits across all of them as
a calendar grid in the terminal.

Quick Start:
    from commitgrid import (
        FolderScanner, RegistryService, CommitAggregator,
        GridRenderer, StatsWindow, build_grid, load_emails,
    )

    # Discover repositories and record them
    registry = RegistryService(Path(".gogitlocalstats"))
    registry.add(FolderScanner().discover("/home/me/code"))

    # Count your commits and draw the grid
    window = StatsWindow()
    result = CommitAggregator(window=window).aggregate(
        registry.load(), load_emails("my_emails"))
    GridRenderer(window).render(build_grid(result.counts))

Domain Objects:
    StatsWindow - Lookback window and day-offset arithmetic
    CommitRecord - Author email and timestamp of a commit
    Cell - One rendered day of the grid

Services:
    FolderScanner - Repository discovery
    RegistryService - Persisted repository list
    CommitAggregator - Per-day commit counts
"""

__version__ = "0.1.0"

# Domain objects
from .domain import (
    StatsWindow,
    CommitRecord,
    Cell,
    CellCategory,
    OUT_OF_RANGE,
)

# Services
from .services import (
    FolderScanner,
    RegistryService,
    CommitAggregator,
    AggregationResult,
    load_emails,
    merge,
)

from .grid import build_grid, build_columns
from .render import GridRenderer

# Configuration
from .config import load_config, save_config

__all__ = [
    # Version
    "__version__",
    # Domain objects
    "StatsWindow",
    "CommitRecord",
    "Cell",
    "CellCategory",
    "OUT_OF_RANGE",
    # Services
    "FolderScanner",
    "RegistryService",
    "CommitAggregator",
    "AggregationResult",
    "load_emails",
    "merge",
    # Grid
    "build_grid",
    "build_columns",
    "GridRenderer",
    # Configuration
    "load_config",
    "save_config",
]
