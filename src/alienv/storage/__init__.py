"""Storage for alias environments."""

from .aliases import AliasFile
from .base import Alias, EnvironmentBackend
from .file import EnvironmentStore, is_valid_env_name

__all__ = [
    "Alias",
    "AliasFile",
    "EnvironmentBackend",
    "EnvironmentStore",
    "is_valid_env_name",
]
