"""Configuration management for alienv.

Environment-first configuration with home-directory defaults.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .errors import FileError

# Defaults
ROOT_DIR_NAME = ".alienv"
ENV_VAR = "ALIAS_ENV"
NO_ENV_ACTIVE = "NO ENV"
ALIAS_FILE = "aliases"
DEFAULT_SHELL = "bash"

TRUTHY = ("1", "true", "yes", "on")


@dataclass
class Config:
    """alienv configuration.

    Attributes:
        root_dir: Directory holding one subdirectory per environment
        env_var: Shell variable that names the active environment
        sentinel: Marker value meaning "no environment active"
        alias_file_name: File name of the alias records inside an env dir
        shell: Shell dialect used to render emitted statements
        debug: Whether debug logging is enabled
    """
    root_dir: Path = field(default_factory=lambda: Path.home() / ROOT_DIR_NAME)
    env_var: str = ENV_VAR
    sentinel: str = NO_ENV_ACTIVE
    alias_file_name: str = ALIAS_FILE
    shell: str = DEFAULT_SHELL
    debug: bool = False


def get_root_dir(
    override: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Get alienv root storage directory.

    Args:
        override: Explicit directory override (--root flag)
        environ: Environment to read ALIENV_HOME from (defaults to os.environ)

    Returns:
        Path to the root directory
    """
    environ = os.environ if environ is None else environ

    if override:
        return Path(override).expanduser()

    if environ.get("ALIENV_HOME"):
        return Path(environ["ALIENV_HOME"]).expanduser()

    try:
        return Path.home() / ROOT_DIR_NAME
    except RuntimeError as e:
        raise FileError("No home directory detected") from e


def get_shell_name(
    override: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> str:
    """Pick the shell dialect: flag, then ALIENV_SHELL, then $SHELL."""
    environ = os.environ if environ is None else environ

    if override:
        return override
    if environ.get("ALIENV_SHELL"):
        return environ["ALIENV_SHELL"]
    if environ.get("SHELL"):
        return Path(environ["SHELL"]).name
    return DEFAULT_SHELL


def create_config(
    environ: Optional[Mapping[str, str]] = None,
    root_override: Optional[str] = None,
    shell_override: Optional[str] = None,
) -> Config:
    """Create a Config instance with proper defaults.

    Args:
        environ: Process environment (defaults to os.environ)
        root_override: Explicit root directory (--root flag)
        shell_override: Explicit shell dialect (--shell flag)

    Returns:
        Configured Config instance
    """
    environ = os.environ if environ is None else environ

    return Config(
        root_dir=get_root_dir(root_override, environ),
        shell=get_shell_name(shell_override, environ),
        debug=environ.get("ALIENV_DEBUG", "").lower() in TRUTHY,
    )
