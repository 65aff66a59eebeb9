"""
Application Entity - A job seeker's application to a posting.
"""

from dataclasses import dataclass
from enum import Enum

from .formatting import field_line


class ApplicationStatus(Enum):
    """Status of a job application, valued by its protocol status code."""

    PENDING = 300
    ACCEPTED = 301
    REJECTED = 302

    @property
    def label(self) -> str:
        """Human-readable status name."""
        return self.name.capitalize()


@dataclass
class Application:
    """
    Application entity held by the store.

    Only ``status`` changes after creation, and only through the store.

    Attributes:
        application_id: Server-generated ID (e.g., "APP1")
        job_seeker_id: Caller-supplied or synthesized applicant ID
        job_id: ID of the job posting applied to
        status: Current application status
        resume: Resume text or base64-encoded file content
    """

    application_id: str
    job_seeker_id: str
    job_id: str
    status: ApplicationStatus = ApplicationStatus.PENDING
    resume: str = ""

    def __post_init__(self) -> None:
        """Validate and normalize application data."""
        if not self.application_id:
            raise ValueError("application_id is required")
        if not self.job_id:
            raise ValueError("job_id is required")

        # Accept raw status codes as well as the enum
        if isinstance(self.status, int):
            self.status = ApplicationStatus(self.status)

    @property
    def display_text(self) -> str:
        """Multi-line listing entry. The resume is not included."""
        return "\n".join([
            field_line("ID", self.application_id),
            field_line("Job Seeker ID", self.job_seeker_id),
            field_line("Job Posting ID", self.job_id),
            field_line("Status", self.status.label),
        ])
