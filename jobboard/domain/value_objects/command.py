"""
Command Value Objects - The protocol's command code table.

Codes are grouped in numeric bands:
- 0-99: session codes (waiting, role selection)
- 100s: job seeker actions
- 200s: hiring manager actions
- 300s: application statuses (never sent as commands)
- 400s: outcome codes
"""

from dataclasses import dataclass
from enum import Enum, IntEnum


class Command(IntEnum):
    """Protocol command codes. Values are part of the wire contract."""

    WAITING = 0
    SELECT_ROLE = 1
    ROLE_JOB_SEEKER = 10
    ROLE_HIRING_MANAGER = 11

    # Job seeker actions
    VIEW_JOBS = 100
    APPLY_TO_JOB = 101
    VIEW_MY_APPLICATIONS = 102

    # Hiring manager actions
    POST_JOB = 200
    VIEW_APPLICATIONS = 201
    ACCEPT_APPLICATION = 202
    REJECT_APPLICATION = 203

    # Application statuses
    STATUS_PENDING = 300
    STATUS_ACCEPTED = 301
    STATUS_REJECTED = 302

    # Outcomes
    SUCCESS = 400
    FAILURE = 401


class Role(Enum):
    """Client role implied by a command's band."""

    JOB_SEEKER = "job_seeker"
    HIRING_MANAGER = "hiring_manager"
    OTHER = "other"


PAYLOAD_COMMANDS = frozenset({
    Command.POST_JOB,
    Command.APPLY_TO_JOB,
    Command.ACCEPT_APPLICATION,
    Command.REJECT_APPLICATION,
})

_KNOWN_CODES = frozenset(int(c) for c in Command)


@dataclass(frozen=True)
class CommandInfo:
    """
    Classification of a command code.

    Attributes:
        code: The raw integer code
        role: Role band the code belongs to
        requires_payload: Whether a data line follows the code on the wire
        is_known: Whether the code appears in the protocol table
    """

    code: int
    role: Role
    requires_payload: bool
    is_known: bool

    @property
    def name(self) -> str:
        """Diagnostic name of the code."""
        return command_name(self.code)


def role_of(code: int) -> Role:
    """Role band for a code (100-199 job seeker, 200-299 hiring manager)."""
    if 100 <= code < 200:
        return Role.JOB_SEEKER
    if 200 <= code < 300:
        return Role.HIRING_MANAGER
    return Role.OTHER


def requires_payload(code: int) -> bool:
    """Check if a command is followed by a data line."""
    return code in PAYLOAD_COMMANDS


def classify(code: int) -> CommandInfo:
    """Classify an arbitrary integer code. Unknown codes are not an error."""
    return CommandInfo(
        code=code,
        role=role_of(code),
        requires_payload=requires_payload(code),
        is_known=code in _KNOWN_CODES,
    )


def command_name(code: int) -> str:
    """Translate a code into its name for logs and messages."""
    if code in _KNOWN_CODES:
        return Command(code).name
    return f"UNKNOWN_COMMAND ({code})"


def job_seeker_commands() -> list[Command]:
    """Commands available to a job seeker."""
    return [Command.VIEW_JOBS, Command.APPLY_TO_JOB, Command.VIEW_MY_APPLICATIONS]


def hiring_manager_commands() -> list[Command]:
    """Commands available to a hiring manager."""
    return [
        Command.POST_JOB,
        Command.VIEW_APPLICATIONS,
        Command.ACCEPT_APPLICATION,
        Command.REJECT_APPLICATION,
    ]
