"""Raw and resolved command models.

A :data:`RawCommand` is built once per invocation straight from the CLI
arguments; optional date/time text and goal tokens are still unresolved.
A :data:`Command` is its resolved counterpart where every deferred field
is concrete.  Both are discriminated unions over the same twelve kinds.

INVARIANT: commands that require a mnemonic never carry an empty or blank one.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import AfterValidator, AwareDatetime, BaseModel, Field

from timelog.domain.goals import GoalAction, GoalActionRequest, GoalArgumentRequest
from timelog.domain.timestamps import ForgetableTimestamp, ForgetableTimestampInput


def _not_blank(value: str) -> str:
    if not value.strip():
        msg = "mnemonic must not be blank"
        raise ValueError(msg)
    return value


Mnemonic = Annotated[str, Field(min_length=1), AfterValidator(_not_blank)]


class _Frozen(BaseModel):
    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# Raw commands
# ---------------------------------------------------------------------------


class RawEnter(_Frozen):
    kind: Literal["enter"] = "enter"
    at: ForgetableTimestampInput = Field(default_factory=ForgetableTimestampInput)


class RawExit(_Frozen):
    kind: Literal["exit"] = "exit"
    at: ForgetableTimestampInput = Field(default_factory=ForgetableTimestampInput)


class RawCreate(_Frozen):
    kind: Literal["create"] = "create"
    mnemonic: Mnemonic
    code: str | None = None


class RawEdit(_Frozen):
    kind: Literal["edit"] = "edit"
    mnemonic: Mnemonic
    code: str | None = None


class RawDelete(_Frozen):
    kind: Literal["delete"] = "delete"
    mnemonic: Mnemonic


class RawStart(_Frozen):
    kind: Literal["start"] = "start"
    mnemonic: Mnemonic
    at: ForgetableTimestampInput = Field(default_factory=ForgetableTimestampInput)


class RawStop(_Frozen):
    kind: Literal["stop"] = "stop"
    mnemonic: str | None = None
    at: ForgetableTimestampInput = Field(default_factory=ForgetableTimestampInput)
    commit: bool = False


class RawCommit(_Frozen):
    kind: Literal["commit"] = "commit"
    mnemonic: Mnemonic
    until: str | None = None


class RawResolve(_Frozen):
    kind: Literal["resolve"] = "resolve"
    mnemonic: str | None = None


class RawGoal(_Frozen):
    kind: Literal["goal"] = "goal"
    action: GoalActionRequest
    argument: GoalArgumentRequest | None = None
    mnemonic: str | None = None


class RawGoals(_Frozen):
    kind: Literal["goals"] = "goals"
    mnemonic: str | None = None


class RawStatus(_Frozen):
    kind: Literal["status"] = "status"
    mnemonic: str | None = None


RAW_COMMAND_TYPES: tuple[type[BaseModel], ...] = (
    RawEnter,
    RawExit,
    RawCreate,
    RawEdit,
    RawDelete,
    RawStart,
    RawStop,
    RawCommit,
    RawResolve,
    RawGoal,
    RawGoals,
    RawStatus,
)

RawCommand = Annotated[
    RawEnter
    | RawExit
    | RawCreate
    | RawEdit
    | RawDelete
    | RawStart
    | RawStop
    | RawCommit
    | RawResolve
    | RawGoal
    | RawGoals
    | RawStatus,
    Field(discriminator="kind"),
]

# ---------------------------------------------------------------------------
# Resolved commands
# ---------------------------------------------------------------------------


class Enter(_Frozen):
    """Arrival at the workplace."""

    kind: Literal["enter"] = "enter"
    at: ForgetableTimestamp


class Exit(_Frozen):
    """Departure from the workplace."""

    kind: Literal["exit"] = "exit"
    at: ForgetableTimestamp


class Create(_Frozen):
    kind: Literal["create"] = "create"
    mnemonic: Mnemonic
    code: str | None = None


class Edit(_Frozen):
    kind: Literal["edit"] = "edit"
    mnemonic: Mnemonic
    code: str | None = None


class Delete(_Frozen):
    kind: Literal["delete"] = "delete"
    mnemonic: Mnemonic


class Start(_Frozen):
    """Work on a task began at ``at``."""

    kind: Literal["start"] = "start"
    mnemonic: Mnemonic
    at: ForgetableTimestamp


class Stop(_Frozen):
    """Work on the current (or named) task stopped at ``at``."""

    kind: Literal["stop"] = "stop"
    mnemonic: str | None = None
    at: ForgetableTimestamp
    commit: bool = False


class Commit(_Frozen):
    """All time on a task up to ``until`` is logged in the external tool."""

    kind: Literal["commit"] = "commit"
    mnemonic: Mnemonic
    until: AwareDatetime


class Resolve(_Frozen):
    kind: Literal["resolve"] = "resolve"
    mnemonic: str | None = None


class Goal(_Frozen):
    kind: Literal["goal"] = "goal"
    action: GoalAction
    mnemonic: str | None = None


class Goals(_Frozen):
    kind: Literal["goals"] = "goals"
    mnemonic: str | None = None


class Status(_Frozen):
    kind: Literal["status"] = "status"
    mnemonic: str | None = None


Command = Annotated[
    Enter | Exit | Create | Edit | Delete | Start | Stop | Commit | Resolve | Goal | Goals | Status,
    Field(discriminator="kind"),
]

