"""
Commit domain object for commitgrid.

CommitRecord holds the two fields bucketing needs: who authored the
commit and when.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CommitRecord:
    """Author email and author timestamp of a single commit."""
    email: str
    when: datetime
    hexsha: str = ""
