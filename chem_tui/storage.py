"""
Storage adapter for Chem Companion

A thin wrapper over the local filesystem that knows nothing about notes.
It moves opaque text in and out of files under the app's private storage.
"""

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class FileStorage:
    """
    Read/write/exists/mkdir primitives over local files.

    Writes go to a temporary file in the same directory and are then renamed
    over the target, so a crash mid-write never leaves a half-written file.
    """

    encoding = "utf-8"

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def mkdir(self, path: Path, recursive: bool = True) -> None:
        """Create a directory. Creating one that already exists is a no-op."""
        Path(path).mkdir(parents=recursive, exist_ok=True)

    def read_text(self, path: Path) -> str:
        """Read a whole file. Raises FileNotFoundError if it does not exist."""
        return Path(path).read_text(encoding=self.encoding)

    def write_text(self, path: Path, content: str) -> None:
        """Replace the contents of a file. Raises OSError on failure."""
        path = Path(path)
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding=self.encoding) as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Wrote {len(content)} chars to {path}")
