"""New command implementation."""

from ..context import Context
from ..errors import AlienvError
from ..tracker import Inactive, compute_load_transition, is_active


def cmd_new(ctx: Context, env: str) -> None:
    """Create an alias environment and switch to it.

    If switching fails (e.g. the previous env's alias file is corrupt) the
    new directory is removed again.

    Args:
        ctx: Invocation context
        env: Name of the environment to create
    """
    # A marker naming a not-yet-existing env is stale; nothing to unload
    current = Inactive() if is_active(ctx.state, env) else ctx.state
    plan = compute_load_transition(current, env)

    ctx.store.create(env)
    try:
        ctx.apply(plan)
    except AlienvError:
        ctx.store.delete(env)
        raise
