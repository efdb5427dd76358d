"""Alias record dataclass and the environment backend protocol."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Protocol

# alias <name>="<command>"
RECORD_RE = re.compile(r'^alias ([^\s=]+)="((?:[^"\\]|\\.)*)"$')


def is_single_line(text: str) -> bool:
    """True if `text` has no character str.splitlines() would break on."""
    return "".join(text.splitlines()) == text


def record_prefix(name: str) -> str:
    """Literal text every record for alias `name` starts with."""
    return f"alias {name}="


@dataclass(frozen=True)
class Alias:
    """A single alias record.

    Attributes:
        name: Alias name, unique within its environment
        command: Literal command text the alias expands to
    """
    name: str
    command: str

    def to_line(self) -> str:
        """Convert to alias file format.

        The line is also a valid shell statement, so loading an environment
        replays its lines verbatim.
        """
        escaped = self.command.replace("\\", "\\\\").replace('"', '\\"')
        return f'{record_prefix(self.name)}"{escaped}"'

    @classmethod
    def from_line(cls, line: str) -> Optional["Alias"]:
        """Parse one alias file line, or None if it is not a record."""
        match = RECORD_RE.match(line)
        if not match:
            return None
        name, escaped = match.groups()
        command = re.sub(r"\\(.)", r"\1", escaped)
        return cls(name=name, command=command)


class EnvironmentBackend(Protocol):
    """Protocol defining the environment store interface."""

    root_dir: Path

    def init(self) -> None:
        """Create the root storage directory if necessary."""
        ...

    def create(self, name: str) -> Path:
        """Create an environment directory and its empty alias file.

        Returns:
            Path to the new alias file
        """
        ...

    def exists(self, name: str) -> bool:
        """Check whether an environment directory exists."""
        ...

    def delete(self, name: str) -> None:
        """Recursively remove an environment directory."""
        ...

    def list(self) -> List[str]:
        """List environment names in directory-enumeration order."""
        ...

    def alias_file(self, name: str) -> Path:
        """Path to an environment's alias file."""
        ...
