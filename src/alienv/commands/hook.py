"""Hook command implementation."""

from ..context import Context


def cmd_hook(ctx: Context, prog: str = "alienv") -> None:
    """Emit the wrapper function that evals alienv's output.

    Usage, in ~/.bashrc or ~/.zshrc:
        eval "$(command alienv hook)"
    """
    ctx.buffer.emit(ctx.shell.hook(prog))
