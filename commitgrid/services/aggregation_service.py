"""
Commit aggregation service for commitgrid.

Walks the history of every registered repository and counts the commits
authored by allow-listed emails, bucketed by day offset within the window.
"""

from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional, Set
import logging

from ..domain import (
    StatsWindow, OUT_OF_RANGE,
    OperationStatus, OperationDetail, OperationSummary,
)
from ..config import FAILURE_POLICIES
from ..exit_codes import ConfigError, EmailFileError, RepositoryError
from ..infra import GitClient, LineStore

logger = logging.getLogger(__name__)


def load_emails(path: str) -> Set[str]:
    """
    Read the email allow-list, one address per line.

    Raises:
        EmailFileError: If the file cannot be opened
    """
    try:
        return set(LineStore(Path(path), auto_create=False, strip_whitespace=True).read())
    except OSError as e:
        raise EmailFileError(f"Cannot read email list {path}: {e}") from e


def new_commit_counts(days: int) -> Dict[int, int]:
    """Counts for offsets 0..days-1, every one seeded to zero."""
    return {offset: 0 for offset in range(days)}


@dataclass
class AggregationResult:
    """Day-offset counts plus what happened to each repository."""
    counts: Dict[int, int]
    summary: OperationSummary

    @property
    def total(self) -> int:
        return sum(self.counts.values())


class CommitAggregator:
    """
    Service for counting authored commits per day.

    Example:
        aggregator = CommitAggregator()
        result = aggregator.aggregate(["/path/to/repo"], {"me@example.com"})
        print(result.counts[aggregator.window.today_offset])
    """

    def __init__(
        self,
        git_client: Optional[GitClient] = None,
        window: Optional[StatsWindow] = None,
        failure_policy: str = "abort"
    ):
        """
        Initialize CommitAggregator.

        Args:
            git_client: Git client instance (creates default if None)
            window: Lookback window (183 days ending now if None)
            failure_policy: "abort" re-raises the first repository error,
                "warn" logs it and moves on to the next repository

        Raises:
            ConfigError: If failure_policy is not one of FAILURE_POLICIES
        """
        if failure_policy not in FAILURE_POLICIES:
            raise ConfigError(
                f"general.failure_policy must be one of {', '.join(FAILURE_POLICIES)}, "
                f"got {failure_policy!r}"
            )
        self.git = git_client or GitClient()
        self.window = window or StatsWindow()
        self.failure_policy = failure_policy

    def aggregate(self, repo_paths: Iterable[str], authors: Set[str]) -> AggregationResult:
        """
        Count commits by ``authors`` across ``repo_paths``.

        Repositories are processed one at a time, in order.

        Raises:
            RepositoryError: Under the "abort" policy, on the first repository
                that cannot be opened or read
        """
        counts = new_commit_counts(self.window.days)
        summary = OperationSummary(operation="aggregate_commits")

        for path in repo_paths:
            try:
                repo_counts = self.count_repository(path, authors)
            except RepositoryError as e:
                if self.failure_policy == "abort":
                    raise
                logger.warning(f"Skipping {path}: {e}")
                summary.add_detail(OperationDetail(
                    repo_path=path,
                    status=OperationStatus.FAILED,
                    action="aggregated",
                    error=str(e),
                ))
                continue

            for offset, count in repo_counts.items():
                counts[offset] += count

            matched = sum(repo_counts.values())
            logger.debug(f"{path}: {matched} commits in window")
            summary.add_detail(OperationDetail(
                repo_path=path,
                status=OperationStatus.SUCCESS,
                action="aggregated",
                metadata={'commits': matched},
            ))

        return AggregationResult(counts=counts, summary=summary)

    def count_repository(self, path: str, authors: Set[str]) -> Counter:
        """
        Bucket one repository's commits by day offset.

        Raises:
            RepositoryError: If the repository cannot be opened or read
        """
        repo_counts: Counter = Counter()

        for commit in self.git.iter_commits(path):
            if commit.email not in authors:
                continue

            offset = self.window.offset_for(commit.when)
            if offset == OUT_OF_RANGE:
                continue

            repo_counts[offset] += 1

        return repo_counts
