"""bash and zsh dialects."""

import shlex

from .base import Shell


class PosixShell(Shell):
    """POSIX-style shells: `export`, `alias`, `unalias`."""

    def __init__(self, name: str = "bash"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def quote(self, text: str) -> str:
        return shlex.quote(text)

    def setenv(self, var: str, value: str) -> str:
        return f"export {var}={self.quote(value)}"

    def unalias(self, name: str) -> str:
        return f"unalias {name}"

    def hook(self, prog: str) -> str:
        return f'{prog}() {{ eval "$(command {prog} "$@")"; }}'
