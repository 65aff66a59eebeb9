"""
Domain Exceptions - Error taxonomy for the job board.

Every error a client can trigger is a ``JobBoardError``. The command
processor renders these as text; none of them closes a connection.
"""


class JobBoardError(Exception):
    """Base class for all job board errors."""


class NotFoundError(JobBoardError):
    """A referenced record does not exist in the store."""

    kind = "Record"

    def __init__(self, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(f"{self.kind} not found: {record_id}")


class JobNotFoundError(NotFoundError):
    """Referenced job posting ID is unknown."""

    kind = "Job"


class ApplicationNotFoundError(NotFoundError):
    """Referenced application ID is unknown."""

    kind = "Application"


class PayloadFormatError(JobBoardError):
    """A data line could not be decoded into fields."""


class ListenerError(JobBoardError):
    """The listening socket could not be set up."""
