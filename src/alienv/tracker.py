"""Active-environment tracking.

The marker variable lives in the calling shell. It is read once per
invocation into an ActiveState and changed only by emitting statements.
"""

from dataclasses import dataclass
from typing import List, Mapping, Union

from .config import ENV_VAR, NO_ENV_ACTIVE
from .errors import AlreadyLoaded


@dataclass(frozen=True)
class Inactive:
    """No environment is active."""


@dataclass(frozen=True)
class Active:
    """Environment `name` is active."""
    name: str


ActiveState = Union[Inactive, Active]


@dataclass(frozen=True)
class Unload:
    """Remove every alias of `env` from the shell."""
    env: str


@dataclass(frozen=True)
class SetMarker:
    """Assign the marker variable."""
    state: ActiveState


@dataclass(frozen=True)
class Load:
    """Define every alias of `env` in the shell."""
    env: str


Step = Union[Unload, SetMarker, Load]


def parse_marker(value: str, sentinel: str = NO_ENV_ACTIVE) -> ActiveState:
    """Interpret a raw marker value. Empty or sentinel means Inactive."""
    if not value or value == sentinel:
        return Inactive()
    return Active(value)


def read_marker(
    environ: Mapping[str, str],
    env_var: str = ENV_VAR,
    sentinel: str = NO_ENV_ACTIVE,
) -> ActiveState:
    """Read the marker from a process environment mapping."""
    return parse_marker(environ.get(env_var, ""), sentinel)


def marker_value(state: ActiveState, sentinel: str = NO_ENV_ACTIVE) -> str:
    """Raw marker value for a state."""
    if isinstance(state, Active):
        return state.name
    return sentinel


def is_active(state: ActiveState, name: str) -> bool:
    return isinstance(state, Active) and state.name == name


def compute_load_transition(current: ActiveState, target: str) -> List[Step]:
    """Plan for making `target` the active environment.

    Raises:
        AlreadyLoaded: if `target` is already active
    """
    if is_active(current, target):
        raise AlreadyLoaded("Environment already loaded")

    plan: List[Step] = []
    if isinstance(current, Active):
        plan.append(Unload(current.name))
    plan.append(SetMarker(Active(target)))
    plan.append(Load(target))
    return plan


def compute_delete_transition(current: ActiveState, target: str) -> List[Step]:
    """Plan to run before `target`'s directory is removed."""
    if is_active(current, target):
        return [Unload(target), SetMarker(Inactive())]
    return []
