"""Per-invocation context shared by every command."""

import os
from typing import List, Mapping, Optional

import structlog

from .config import Config
from .emitter import CommandBuffer
from .errors import NoActiveEnvironment
from .shells import Shell, get_shell
from .storage import AliasFile, EnvironmentBackend, EnvironmentStore
from .tracker import (
    Active,
    ActiveState,
    Load,
    SetMarker,
    Step,
    Unload,
    marker_value,
    read_marker,
)

logger = structlog.get_logger(__name__)


class Context:
    """Everything one invocation needs.

    Attributes:
        config: Resolved configuration
        store: Environment store rooted at config.root_dir
        shell: Dialect for emitted statements
        buffer: Command buffer printed at exit
        state: Active environment as read from the marker variable
        marker_set: Whether the marker variable was present at all
    """

    def __init__(
        self,
        config: Config,
        environ: Optional[Mapping[str, str]] = None,
        shell: Optional[Shell] = None,
    ):
        environ = os.environ if environ is None else environ

        self.config = config
        self.store: EnvironmentBackend = EnvironmentStore(
            root_dir=config.root_dir,
            alias_file_name=config.alias_file_name,
            sentinel=config.sentinel,
        )
        self.shell = shell or get_shell(config.shell)
        self.buffer = CommandBuffer(self.shell, config.env_var)
        self.state: ActiveState = read_marker(
            environ, config.env_var, config.sentinel
        )
        self.marker_set = config.env_var in environ

    def setup(self) -> None:
        """Perform any necessary initial setup."""
        self.store.init()

        # Start tracking on first use
        if not self.marker_set:
            self.buffer.emit_set_marker(self.config.sentinel)

    def aliases(self, env: str) -> AliasFile:
        return AliasFile(self.store.alias_file(env))

    def active_env(self) -> str:
        """Name of the active environment.

        Raises:
            NoActiveEnvironment: if the marker holds the sentinel or is unset
        """
        if not isinstance(self.state, Active):
            raise NoActiveEnvironment("No alias env active.")
        return self.state.name

    def apply(self, plan: List[Step]) -> None:
        """Emit the statements realizing a transition plan.

        The whole plan is rendered before anything is emitted, so a corrupt
        alias file leaves the buffer as it was.
        """
        staged = CommandBuffer(self.shell, self.config.env_var)
        state = self.state

        for step in plan:
            if isinstance(step, Unload):
                if not self.store.exists(step.env):
                    logger.warning("unload_missing_env", env=step.env)
                    continue
                staged.emit_unaliases(self.aliases(step.env).read_all())
            elif isinstance(step, SetMarker):
                staged.emit_set_marker(
                    marker_value(step.state, self.config.sentinel)
                )
                state = step.state
            elif isinstance(step, Load):
                staged.emit_aliases(self.aliases(step.env).read_all())

        for statement in staged.statements:
            self.buffer.emit(statement)
        self.state = state

