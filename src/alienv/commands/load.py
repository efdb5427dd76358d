"""Load command implementation."""

from ..context import Context
from ..errors import NotFound
from ..tracker import compute_load_transition


def cmd_load(ctx: Context, env: str) -> None:
    """Switch the active environment to `env`.

    Unloads the aliases of the previously active environment (if any),
    points the marker at `env` and defines its aliases.
    """
    if not ctx.store.exists(env):
        raise NotFound(f"Environment {env} does not exist.")

    ctx.apply(compute_load_transition(ctx.state, env))
