"""Add command implementation."""

import re

import structlog

from ..context import Context
from ..errors import UsageError
from ..storage.base import is_single_line

logger = structlog.get_logger(__name__)

# Anything that keeps `alias <name>=` unambiguous
VALID_ALIAS_RE = re.compile(r"[^\s=\"'`$;&|<>()\\]+")


def cmd_add(ctx: Context, alias: str, command: str) -> None:
    """Add an alias to the active environment and define it right away.

    An existing alias with the same name is replaced, so each name appears
    once in the alias file.

    Args:
        ctx: Invocation context
        alias: Alias name
        command: Command text the alias expands to
    """
    env = ctx.active_env()

    if not VALID_ALIAS_RE.fullmatch(alias):
        raise UsageError(f"Not a valid alias name: {alias}")

    if not is_single_line(command):
        raise UsageError("Alias command must be a single line")

    aliases = ctx.aliases(env)
    if aliases.remove(alias):
        logger.debug("alias_replaced", env=env, alias=alias)
    aliases.append(alias, command)

    ctx.buffer.emit(ctx.shell.alias(alias, command))
