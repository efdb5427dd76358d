"""Shell dialects for alienv."""

from ..errors import UnknownShell
from .base import Shell
from .fish import FishShell
from .posix import PosixShell

__all__ = ["Shell", "PosixShell", "FishShell", "get_shell", "SHELLS"]

SHELLS = ("bash", "zsh", "sh", "fish")


def get_shell(name: str = "bash") -> Shell:
    """Get the dialect for a shell name.

    Args:
        name: Shell name or path (e.g. "zsh", "/bin/bash")

    Returns:
        Shell instance
    """
    name = name.rsplit("/", 1)[-1]
    if name in ("bash", "zsh", "sh"):
        return PosixShell(name)
    elif name == "fish":
        return FishShell()
    else:
        raise UnknownShell(f"Unsupported shell: {name}")
