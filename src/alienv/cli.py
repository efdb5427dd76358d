"""CLI argument parsing and command dispatch for alienv.

alienv prints shell statements on stdout; they only take effect once the
calling shell evaluates them (see `alienv hook`).
"""

import argparse
import os
import sys
from typing import List, Optional

import structlog

from . import __version__
from .config import create_config
from .context import Context
from .errors import AlienvError, UsageError
from .shells import PosixShell, Shell, get_shell
from .utils.log import configure_logging
from .commands import (
    cmd_new,
    cmd_delete,
    cmd_load,
    cmd_show,
    cmd_add,
    cmd_rem,
    cmd_aliases,
    cmd_hook,
)

logger = structlog.get_logger(__name__)


def show_help() -> None:
    """Human-friendly help output (stderr, stdout is for the shell)."""
    help_text = """
alienv - Alias environment manager
==================================

SETUP (once, in ~/.bashrc or ~/.zshrc):
  eval "$(command alienv hook)"

COMMANDS:
  new <env>               Create new environment and switch to it
  delete <env>            Delete existing environment
  load <env>              Switch to existing environment
  show                    Display existing environments (* = active)
  add <alias> <command>   Add alias to current environment
  rem <alias>             Remove alias from current environment
  aliases                 List aliases of current environment
  hook [shell]            Print the shell wrapper function

FLAGS:
  --root DIR        Storage directory (default ~/.alienv, or $ALIENV_HOME)
  --shell NAME      Shell dialect: bash|zsh|sh|fish (default from $SHELL)

EXAMPLES:
  alienv new work
  alienv add ll "ls -la"
  alienv show
  alienv load home
  alienv rem ll
  alienv delete work

ENVIRONMENT:
  ALIAS_ENV         Active environment (set by alienv, do not edit)
  ALIENV_HOME       Storage directory override
  ALIENV_SHELL      Shell dialect override
  ALIENV_DEBUG      Set to 1 for debug logs on stderr
"""
    print(help_text, file=sys.stderr)


class ArgumentParser(argparse.ArgumentParser):
    """Parser that reports usage errors as UsageError."""

    def error(self, message: str) -> None:
        raise UsageError(message)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = ArgumentParser(
        prog="alienv",
        description="Alias environment manager",
        add_help=False,
    )
    parser.add_argument(
        "-h", "--help", action="store_true", help="Show help message"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show version"
    )
    parser.add_argument(
        "--root", dest="root", default=None,
        help="Storage directory (default ~/.alienv)"
    )
    parser.add_argument(
        "--shell", dest="shell", default=None,
        help="Shell dialect: bash|zsh|sh|fish"
    )
    parser.add_argument(
        "command", nargs="?", help="Command to run"
    )
    parser.add_argument(
        "args", nargs="*", help="Command arguments"
    )

    return parser


def require_args(cmd: str, cmd_args: List[str], names: List[str]) -> List[str]:
    """Check the positional argument count for a command."""
    if len(cmd_args) != len(names):
        usage = " ".join(f"<{name}>" for name in names)
        raise UsageError(f"Usage: alienv {cmd} {usage}".rstrip())
    return cmd_args


def run_command(ctx: Context, cmd: str, cmd_args: List[str]) -> None:
    """Run a command, emitting into ctx.buffer.

    Args:
        ctx: Invocation context (already set up)
        cmd: Command name
        cmd_args: Positional command arguments
    """
    logger.debug("run_command", command=cmd, args=cmd_args)

    if cmd == "new":
        (env,) = require_args(cmd, cmd_args, ["env"])
        cmd_new(ctx, env)

    elif cmd == "delete":
        (env,) = require_args(cmd, cmd_args, ["env"])
        cmd_delete(ctx, env)

    elif cmd == "load":
        (env,) = require_args(cmd, cmd_args, ["env"])
        cmd_load(ctx, env)

    elif cmd == "show":
        require_args(cmd, cmd_args, [])
        cmd_show(ctx)

    elif cmd == "add":
        alias, command = require_args(cmd, cmd_args, ["alias", "command"])
        cmd_add(ctx, alias, command)

    elif cmd == "rem":
        (alias,) = require_args(cmd, cmd_args, ["alias"])
        cmd_rem(ctx, alias)

    elif cmd == "aliases":
        require_args(cmd, cmd_args, [])
        cmd_aliases(ctx)

    elif cmd == "hook":
        # The optional shell name was folded into ctx.shell by main()
        if len(cmd_args) > 1:
            raise UsageError("Usage: alienv hook [shell]")
        cmd_hook(ctx)

    else:
        raise UsageError(f"Unknown command: {cmd}")


def error_shell(name: Optional[str]) -> Shell:
    """Best-effort dialect for the error statement."""
    try:
        return get_shell(name or "bash")
    except AlienvError:
        return PosixShell()


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    configure_logging()
    parser = create_parser()
    shell_name = None

    try:
        args = parser.parse_args(argv)

        # Handle special flags
        if args.version:
            print(f"alienv {__version__}", file=sys.stderr)
            return

        if args.help or not args.command:
            show_help()
            return

        shell_override = args.shell
        if args.command == "hook" and args.args:
            shell_override = args.args[0]

        config = create_config(os.environ, args.root, shell_override)
        shell_name = config.shell
        configure_logging(config.debug)

        ctx = Context(config, environ=os.environ)
        ctx.setup()
        run_command(ctx, args.command, args.args or [])
        output = ctx.buffer.flush()

    except AlienvError as e:
        logger.debug("command_failed", error=type(e).__name__)
        print(error_shell(shell_name).echo(f"Error: {e}"))
        sys.exit(1)

    print(output)
