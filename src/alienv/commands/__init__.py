"""Command implementations for alienv CLI."""

from .new import cmd_new
from .delete import cmd_delete
from .load import cmd_load
from .show import cmd_show
from .add import cmd_add
from .rem import cmd_rem
from .aliases import cmd_aliases
from .hook import cmd_hook

__all__ = [
    "cmd_new",
    "cmd_delete",
    "cmd_load",
    "cmd_show",
    "cmd_add",
    "cmd_rem",
    "cmd_aliases",
    "cmd_hook",
]
