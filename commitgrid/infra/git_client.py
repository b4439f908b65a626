"""
Git client infrastructure for commitgrid.

Provides a clean abstraction over the git library.
All repository access goes through this client, making it:
- Easy to mock for testing
- Consistent in error handling
- Isolated from business logic
"""

from typing import Iterator
from pathlib import Path
import logging

from git import Repo
from git.exc import GitError, InvalidGitRepositoryError, NoSuchPathError

from ..domain import CommitRecord
from ..exit_codes import RepositoryError

logger = logging.getLogger(__name__)


class GitClient:
    """
    Abstraction over GitPython.

    Example:
        client = GitClient()
        for commit in client.iter_commits("/path/to/repo"):
            print(commit.email, commit.when)
    """

    def is_git_repo(self, path: str) -> bool:
        """Check if path is a git repository."""
        return (Path(path) / ".git").exists()

    def open(self, path: str) -> Repo:
        """
        Open the repository rooted at ``path``.

        Raises:
            RepositoryError: If the path is missing or not a valid repository
        """
        try:
            return Repo(path)
        except (InvalidGitRepositoryError, NoSuchPathError) as e:
            raise RepositoryError(f"Cannot open repository {path}: {e}", path=path) from e

    def iter_commits(self, path: str) -> Iterator[CommitRecord]:
        """
        Yield commits reachable from HEAD, newest first.

        The repository is closed once the history is exhausted or the
        caller stops iterating.

        Args:
            path: Path to git repository

        Yields:
            CommitRecord with author email and author timestamp

        Raises:
            RepositoryError: If HEAD cannot be resolved or the log cannot be read
        """
        repo = self.open(path)
        try:
            try:
                head = repo.head.commit
            except (ValueError, GitError) as e:
                raise RepositoryError(f"Cannot resolve HEAD in {path}: {e}", path=path) from e

            logger.debug(f"Reading history of {path} from {head.hexsha[:8]}")
            try:
                for commit in repo.iter_commits(head.hexsha):
                    yield CommitRecord(
                        email=commit.author.email or "",
                        when=commit.authored_datetime,
                        hexsha=commit.hexsha,
                    )
            except (ValueError, GitError) as e:
                raise RepositoryError(f"Cannot read log of {path}: {e}", path=path) from e
        finally:
            repo.close()
