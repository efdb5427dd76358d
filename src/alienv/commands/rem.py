"""Rem command implementation."""

from ..context import Context
from ..errors import NoSuchAlias


def cmd_rem(ctx: Context, alias: str) -> None:
    """Remove an alias from the active environment and unset it."""
    env = ctx.active_env()

    if not ctx.aliases(env).remove(alias):
        raise NoSuchAlias("No such alias.")

    ctx.buffer.emit(ctx.shell.unalias(alias))
