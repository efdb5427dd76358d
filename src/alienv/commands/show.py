"""Show command implementation."""

from ..context import Context
from ..tracker import is_active


def cmd_show(ctx: Context) -> None:
    """Echo every environment, marking the active one with `*`."""
    for env in sorted(ctx.store.list()):
        if is_active(ctx.state, env):
            ctx.buffer.emit_echo(f"{env}*")
        else:
            ctx.buffer.emit_echo(env)
