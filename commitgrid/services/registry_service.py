"""
Repository registry service for commitgrid.

The registry is the ordered, duplicate-free list of repository paths found
by previous scans, persisted one path per line.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Sequence
import logging

from ..exit_codes import RegistryError
from ..infra import LineStore

logger = logging.getLogger(__name__)


def merge(existing: Sequence[str], incoming: Iterable[str]) -> List[str]:
    """
    Append incoming paths not already present.

    ``existing`` keeps its order and is assumed duplicate-free; incoming
    entries are appended in the order given.
    """
    merged = list(existing)
    for path in incoming:
        if path not in merged:
            merged.append(path)
    return merged


class RegistryService:
    """
    Service for reading and updating the persisted repository registry.

    Example:
        registry = RegistryService(Path(".gogitlocalstats"))
        registry.add(["/home/user/code/project"])
        for path in registry.load():
            print(path)
    """

    def __init__(self, path: Path, store: Optional[LineStore] = None):
        """
        Initialize RegistryService.

        Args:
            path: Registry file location
            store: Line store instance (creates default if None)
        """
        self.path = Path(path)
        self.store = store or LineStore(self.path)

    @classmethod
    def from_config(cls, config, override: Optional[str] = None) -> 'RegistryService':
        """Create a registry at ``override`` or the configured registry_file."""
        path = override or config.get('general', {}).get('registry_file')
        if not path:
            raise RegistryError("No registry file configured")
        return cls(Path(path).expanduser())

    def load(self) -> List[str]:
        """
        Read the registered repository paths.

        A missing registry file is created empty.

        Raises:
            RegistryError: If the file exists but cannot be read
        """
        try:
            return self.store.read()
        except OSError as e:
            raise RegistryError(f"Cannot read registry {self.path}: {e}") from e

    def add(self, paths: Iterable[str]) -> List[str]:
        """
        Merge ``paths`` into the registry and rewrite the file.

        Returns:
            The full registry after the merge

        Raises:
            RegistryError: If the file cannot be read or written
        """
        existing = self.load()
        merged = merge(existing, paths)
        added = len(merged) - len(existing)

        try:
            self.store.write(merged)
        except OSError as e:
            raise RegistryError(f"Cannot write registry {self.path}: {e}") from e

        logger.debug(f"Registry {self.path}: {added} added, {len(merged)} total")
        return merged
