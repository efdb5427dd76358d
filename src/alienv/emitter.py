"""Shell command buffer.

The buffer is the only effect an invocation has on the calling shell: it is
printed once at exit and evaluated there.
"""

from typing import Iterable, List

import structlog

from .errors import BufferFlushed
from .shells import Shell

logger = structlog.get_logger(__name__)


class CommandBuffer:
    """Ordered, append-only sequence of shell statements.

    Output format:
        stmt1;stmt2;stmt3;
    """

    def __init__(self, shell: Shell, env_var: str):
        """Initialize an empty buffer.

        Args:
            shell: Dialect used to render statements
            env_var: Name of the active-environment marker variable
        """
        self.shell = shell
        self.env_var = env_var
        self._statements: List[str] = []
        self._flushed = False

    def _check_open(self) -> None:
        if self._flushed:
            raise BufferFlushed("Command buffer already flushed")

    def emit(self, statement: str) -> None:
        """Append one statement."""
        self._check_open()
        self._statements.append(statement)

    def emit_set_marker(self, value: str) -> None:
        """Append the assignment of the marker variable."""
        logger.debug("set_marker", value=value)
        self.emit(self.shell.setenv(self.env_var, value))

    def emit_echo(self, text: str) -> None:
        self.emit(self.shell.echo(text))

    def emit_aliases(self, aliases: Iterable) -> None:
        """Define each alias, in order (later duplicates win)."""
        for alias in aliases:
            self.emit(self.shell.alias(alias.name, alias.command))

    def emit_unaliases(self, aliases: Iterable) -> None:
        """Remove each distinct alias name once."""
        seen = set()
        for alias in aliases:
            if alias.name in seen:
                continue
            seen.add(alias.name)
            self.emit(self.shell.unalias(alias.name))

    @property
    def statements(self) -> List[str]:
        """Copy of the statements emitted so far."""
        return list(self._statements)

    def flush(self) -> str:
        """Return the whole buffer as text. Allowed once."""
        self._check_open()
        self._flushed = True
        return "".join(f"{statement};" for statement in self._statements)
