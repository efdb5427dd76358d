"""Line-oriented operations on a single environment's alias file."""

import os
import tempfile
from pathlib import Path
from typing import List

import structlog

from ..errors import CorruptFile, FileError, UsageError
from .base import Alias, is_single_line, record_prefix

logger = structlog.get_logger(__name__)


class AliasFile:
    """One environment's alias file.

    File format, one record per line:
        alias <name>="<command>"

    Every line is also a valid shell statement, which is what lets an
    environment be loaded by replaying its file.
    """

    def __init__(self, path: Path):
        """Initialize the alias file wrapper.

        Args:
            path: Path to the alias file (must already exist for reads)
        """
        self.path = Path(path)

    def _read_lines(self) -> List[str]:
        try:
            return self.path.read_text(encoding="utf-8").splitlines()
        except UnicodeDecodeError as e:
            raise CorruptFile(f"Invalid alias file {self.path} (not UTF-8)") from e
        except OSError as e:
            raise FileError("Unable to access aliases") from e

    def append(self, name: str, command: str) -> Alias:
        """Append one record. Does not check for an existing record."""
        if not is_single_line(command):
            raise UsageError("Alias command must be a single line")

        alias = Alias(name=name, command=command)
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(alias.to_line() + "\n")
        except OSError as e:
            raise FileError("Unable to write alias.") from e

        logger.debug("alias_appended", alias=name, path=str(self.path))
        return alias

    def remove(self, name: str) -> bool:
        """Drop every record for alias `name`.

        Returns:
            True if at least one line was removed. The file is left untouched
            when nothing matched.
        """
        prefix = record_prefix(name)
        lines = self._read_lines()
        kept = [line for line in lines if not line.startswith(prefix)]

        if len(kept) == len(lines):
            return False

        self._rewrite(kept)
        logger.debug(
            "alias_removed", alias=name, records=len(lines) - len(kept)
        )
        return True

    def _rewrite(self, lines: List[str]) -> None:
        """Replace the file contents via a temp file in the same directory."""
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
        except OSError as e:
            raise FileError("Unable to write to file") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                for line in lines:
                    f.write(line + "\n")
            os.replace(tmp_name, self.path)
        except OSError as e:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise FileError("Unable to write to file") from e

    def read_all(self) -> List[Alias]:
        """Parse every record in file order (duplicates included)."""
        aliases = []
        for lineno, line in enumerate(self._read_lines(), start=1):
            alias = Alias.from_line(line)
            if alias is None:
                raise CorruptFile(
                    f"Invalid alias file {self.path} (line {lineno})"
                )
            aliases.append(alias)
        return aliases

