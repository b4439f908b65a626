"""
Folder scanning service for commitgrid.

Walks a directory tree depth-first and reports every directory that holds a
``.git`` entry. Excluded directory names are never entered.
"""

from typing import Callable, Iterable, List, Optional
import logging
import os

from ..exit_codes import ScanError

logger = logging.getLogger(__name__)


GIT_DIR = '.git'

# Directories to exclude from repository discovery
EXCLUDE_DIRS = frozenset({
    'node_modules', 'vendor',  # too large to be worth walking
    'Pictures', 'Library', '.Trash',  # macOS folders that deny access
})

ExcludePredicate = Callable[[str], bool]


def name_excluder(names: Iterable[str]) -> ExcludePredicate:
    """Build an exclusion predicate matching directory names exactly."""
    excluded = frozenset(names)
    return lambda name: name in excluded


class FolderScanner:
    """
    Service for discovering repository roots below a folder.

    Example:
        scanner = FolderScanner()
        for path in scanner.discover("/home/user/code"):
            print(path)
    """

    def __init__(
        self,
        exclude: Optional[ExcludePredicate] = None,
        on_found: Optional[Callable[[str], None]] = None
    ):
        """
        Initialize FolderScanner.

        Args:
            exclude: Predicate over directory names; True skips the directory.
                Defaults to EXCLUDE_DIRS.
            on_found: Called with each repository path as it is discovered
        """
        self.exclude = exclude or name_excluder(EXCLUDE_DIRS)
        self.on_found = on_found

    @classmethod
    def from_config(cls, config, on_found=None) -> 'FolderScanner':
        """Create a scanner excluding the configured directory names."""
        names = config.get('scan', {}).get('exclude_directories')
        if names is None:
            names = EXCLUDE_DIRS
        elif isinstance(names, str):
            names = [n.strip() for n in names.split(',') if n.strip()]
        return cls(exclude=name_excluder(names), on_found=on_found)

    def discover(self, root: str) -> List[str]:
        """
        Find repository roots under ``root``.

        Args:
            root: Directory to walk. A trailing separator is ignored.

        Returns:
            Repository paths in traversal order

        Raises:
            ScanError: On any filesystem error; no partial result is returned
        """
        root = root.rstrip('/') or '/'
        found: List[str] = []
        self._scan(root, found)
        return found

    def _scan(self, folder: str, found: List[str]) -> None:
        try:
            with os.scandir(folder) as it:
                entries = sorted(it, key=lambda e: e.name)
        except PermissionError as e:
            raise ScanError(f"Permission denied: {folder}", path=folder, permission=True) from e
        except OSError as e:
            raise ScanError(f"Cannot read {folder}: {e}", path=folder) from e

        for entry in entries:
            try:
                if not entry.is_dir(follow_symlinks=False):
                    continue
            except OSError as e:
                raise ScanError(f"Cannot stat {entry.path}: {e}", path=entry.path) from e

            path = os.path.join(folder, entry.name)

            if entry.name == GIT_DIR:
                logger.debug(f"Found repository: {folder}")
                found.append(folder)
                if self.on_found:
                    self.on_found(folder)
                continue

            if self.exclude(entry.name):
                logger.debug(f"Skipping excluded directory: {path}")
                continue

            self._scan(path, found)
