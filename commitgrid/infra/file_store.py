"""
File store infrastructure for commitgrid.

Provides line-delimited text persistence with:
- Atomic writes (write to temp, then rename)
- Automatic creation of a missing file
- One entry per line, blank lines ignored on read
"""

import os
import tempfile
from pathlib import Path
from typing import Iterable, List
import logging

logger = logging.getLogger(__name__)


class LineStore:
    """
    Plain-text file holding one entry per line.

    Example:
        store = LineStore(Path(".gogitlocalstats"))
        paths = store.read()
        store.write(paths + ["/home/me/project"])
    """

    def __init__(self, path: Path, auto_create: bool = True, strip_whitespace: bool = False):
        """
        Initialize LineStore.

        Args:
            path: Path to the text file
            auto_create: Create the file (empty) on first read if it does not exist
            strip_whitespace: Strip surrounding whitespace from each entry;
                otherwise only the line ending is removed
        """
        self.path = Path(path).expanduser()
        self.auto_create = auto_create
        self.strip_whitespace = strip_whitespace

    def _write_atomic(self, lines: List[str]) -> None:
        """Write lines atomically using temp file and rename."""
        fd, temp_path = tempfile.mkstemp(
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp"
        )

        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                for line in lines:
                    f.write(line)
                    f.write('\n')

            os.replace(temp_path, self.path)

        except BaseException:
            try:
                os.unlink(temp_path)
            except OSError:
                pass
            raise

    def read(self) -> List[str]:
        """
        Read every non-blank line without its line ending.

        Raises:
            FileNotFoundError: If the file is missing and auto_create is off
            OSError: For any other read failure
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                if self.strip_whitespace:
                    return [line.strip() for line in f if line.strip()]
                return [line.rstrip('\r\n') for line in f if line.strip()]
        except FileNotFoundError:
            if not self.auto_create:
                raise
            logger.debug(f"Creating empty {self.path}")
            self._write_atomic([])
            return []

    def write(self, lines: Iterable[str]) -> None:
        """
        Replace the whole file with ``lines``.

        Raises:
            OSError: If the file cannot be written
        """
        self._write_atomic(list(lines))
