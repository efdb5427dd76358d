"""Directory-per-environment storage backend."""

import re
import shutil
from pathlib import Path
from typing import List

import structlog

from ..config import ALIAS_FILE, NO_ENV_ACTIVE
from ..errors import AlreadyExists, FileError, InvalidName, NotFound

logger = structlog.get_logger(__name__)

VALID_ENV_RE = re.compile(r"[-_.A-Za-z0-9]+")


def is_valid_env_name(name: str, sentinel: str = NO_ENV_ACTIVE) -> bool:
    """Must be a fully POSIX-compliant name that is not the sentinel."""
    return (
        VALID_ENV_RE.fullmatch(name) is not None
        and name not in (".", "..")
        and name != sentinel
    )


class EnvironmentStore:
    """File-based environment store.

    Layout:
        <root_dir>/<env>/aliases

    An environment exists iff its directory is present under root_dir.
    """

    def __init__(
        self,
        root_dir: Path,
        alias_file_name: str = ALIAS_FILE,
        sentinel: str = NO_ENV_ACTIVE,
    ):
        """Initialize the store.

        Args:
            root_dir: Root storage directory
            alias_file_name: Name of the alias file inside each env directory
            sentinel: Reserved name that can never be an environment
        """
        self.root_dir = Path(root_dir)
        self.alias_file_name = alias_file_name
        self.sentinel = sentinel

    def init(self) -> None:
        """Create the root directory if necessary."""
        try:
            self.root_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise FileError(
                "Cannot initialize alienv - insufficient permissions?"
            ) from e

    def env_dir(self, name: str) -> Path:
        return self.root_dir / name

    def alias_file(self, name: str) -> Path:
        return self.env_dir(name) / self.alias_file_name

    def create(self, name: str) -> Path:
        """Create a new environment with an empty alias file."""
        if not is_valid_env_name(name, self.sentinel):
            raise InvalidName(
                "Not a valid environment name. Only numbers, letters, "
                "period, underscore, and hyphen allowed."
            )

        if self.exists(name):
            raise AlreadyExists(f"Environment {name} already exists.")

        env_dir = self.env_dir(name)
        try:
            env_dir.mkdir(parents=True)
        except OSError as e:
            raise FileError(
                "Cannot create directory - insufficient permissions?"
            ) from e

        alias_file = self.alias_file(name)
        try:
            alias_file.touch()
        except OSError as e:
            raise FileError(
                "Cannot create file - insufficient permissions?"
            ) from e

        logger.debug("environment_created", env=name, path=str(env_dir))
        return alias_file

    def exists(self, name: str) -> bool:
        """Scan the root directory for an entry named exactly `name`."""
        return name in self.list()

    def delete(self, name: str) -> None:
        """Remove an environment directory and everything in it."""
        env_dir = self.env_dir(name)
        if not self.exists(name) or not env_dir.is_dir():
            raise NotFound(f"No such environment: {name}")

        try:
            shutil.rmtree(env_dir)
        except OSError as e:
            raise FileError(f"Unable to delete environment {name}") from e

        logger.debug("environment_deleted", env=name)

    def list(self) -> List[str]:
        """List environment names (enumeration order, no sorting)."""
        if not self.root_dir.exists():
            return []
        try:
            return [entry.name for entry in self.root_dir.iterdir()]
        except OSError as e:
            raise FileError("Unable to read directory") from e
