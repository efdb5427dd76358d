"""Delete command implementation."""

from ..context import Context
from ..errors import NotFound
from ..tracker import compute_delete_transition


def cmd_delete(ctx: Context, env: str) -> None:
    """Delete an alias environment.

    If it is the active one, its aliases are unset and the marker is reset
    before the directory is removed.
    """
    if not ctx.store.exists(env):
        raise NotFound(f"No such environment: {env}")

    ctx.apply(compute_delete_transition(ctx.state, env))
    ctx.store.delete(env)
