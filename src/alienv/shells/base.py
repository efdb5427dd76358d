"""Base Shell abstraction."""

from abc import ABC, abstractmethod

from ..storage.base import Alias


class Shell(ABC):
    """A shell dialect.

    alienv cannot change its parent shell's state; it can only print
    statements for that shell to evaluate. A Shell knows how to spell
    those statements.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Dialect name (bash, zsh, fish)."""
        ...

    @abstractmethod
    def quote(self, text: str) -> str:
        """Quote text as a single literal word."""
        ...

    @abstractmethod
    def setenv(self, var: str, value: str) -> str:
        """Statement exporting `var` with `value`."""
        ...

    @abstractmethod
    def unalias(self, name: str) -> str:
        """Statement removing alias `name`."""
        ...

    @abstractmethod
    def hook(self, prog: str) -> str:
        """Wrapper function that evaluates `prog`'s output in this shell."""
        ...

    def alias(self, name: str, command: str) -> str:
        """Statement defining alias `name`."""
        return Alias(name=name, command=command).to_line()

    def echo(self, text: str) -> str:
        """Statement printing `text` verbatim."""
        return f"echo {self.quote(text)}"
