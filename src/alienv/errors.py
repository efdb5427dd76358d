"""Exceptions raised by alienv.

Every error is terminal for an invocation: the CLI turns it into a single
``echo 'Error: ...'`` statement and exits 1.
"""


class AlienvError(RuntimeError):
    """Base class for all alienv errors."""


class UsageError(AlienvError):
    """Raised for unknown commands or wrong argument counts."""


class InvalidName(AlienvError):
    """Raised when an environment name fails validation."""


class AlreadyExists(AlienvError):
    """Raised when creating an environment that is already present."""


class NotFound(AlienvError):
    """Raised when an environment directory does not exist."""


class AlreadyLoaded(AlienvError):
    """Raised when loading the environment that is already active."""


class NoActiveEnvironment(AlienvError):
    """Raised when an alias operation needs an active environment."""


class NoSuchAlias(AlienvError):
    """Raised when removing an alias the active environment does not have."""


class CorruptFile(AlienvError):
    """Raised when an alias file line is not a valid alias record."""


class FileError(AlienvError):
    """Raised on I/O failures (permissions, missing home directory)."""


class UnknownShell(AlienvError):
    """Raised when no dialect is registered for a shell name."""


class BufferFlushed(AlienvError):
    """Raised when a command buffer is written to or flushed twice."""
