"""fish dialect."""

from .base import Shell


class FishShell(Shell):
    """fish: aliases are functions, variables are set with `set -gx`."""

    @property
    def name(self) -> str:
        return "fish"

    def quote(self, text: str) -> str:
        escaped = text.replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"

    def setenv(self, var: str, value: str) -> str:
        return f"set -gx {var} {self.quote(value)}"

    def unalias(self, name: str) -> str:
        return f"functions -e {name}"

    def hook(self, prog: str) -> str:
        return f"function {prog}; eval (command {prog} $argv | string collect); end"
