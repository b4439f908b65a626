"""
Infrastructure layer for commitgrid.

Contains abstractions for external systems:
- GitClient: Repository history through GitPython
- LineStore: Line-delimited text file persistence

These provide clean interfaces that can be mocked for testing.
"""

from .git_client import GitClient
from .file_store import LineStore

__all__ = [
    'GitClient',
    'LineStore',
]
