"""
Service layer for commitgrid.

Contains business logic that orchestrates domain objects and infrastructure:
- FolderScanner: Repository discovery below a folder
- RegistryService: Persisted list of discovered repositories
- CommitAggregator: Per-day commit counts for a set of authors

Services are the primary API for commands to use.
"""

from .scanner_service import FolderScanner, EXCLUDE_DIRS, name_excluder
from .registry_service import RegistryService, merge
from .aggregation_service import (
    CommitAggregator,
    AggregationResult,
    load_emails,
    new_commit_counts,
)

__all__ = [
    'FolderScanner',
    'EXCLUDE_DIRS',
    'name_excluder',
    'RegistryService',
    'merge',
    'CommitAggregator',
    'AggregationResult',
    'load_emails',
    'new_commit_counts',
]
