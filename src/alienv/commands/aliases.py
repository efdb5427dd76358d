"""Aliases command implementation."""

from ..context import Context


def cmd_aliases(ctx: Context) -> None:
    """Echo the alias records of the active environment."""
    env = ctx.active_env()
    for alias in ctx.aliases(env).read_all():
        ctx.buffer.emit_echo(alias.to_line())
