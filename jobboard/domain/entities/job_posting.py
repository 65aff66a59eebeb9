"""
JobPosting Entity - A job offer published by a hiring manager.
"""

from dataclasses import dataclass

from .formatting import field_line


@dataclass(frozen=True)
class JobPosting:
    """
    Immutable job posting held by the store.

    Attributes:
        job_id: Server-generated ID (e.g., "JOB1")
        title: Job title
        company: Company name
        location: Job location
        description: Free-text description
        skills: Required skills, comma separated
        salary: Salary range, free text
    """

    job_id: str
    title: str
    company: str
    location: str
    description: str = ""
    skills: str = ""
    salary: str = ""

    def __post_init__(self) -> None:
        """Validate job posting data after initialization."""
        if not self.job_id:
            raise ValueError("job_id is required")

    @property
    def display_text(self) -> str:
        """Multi-line listing entry."""
        return "\n".join([
            field_line("ID", self.job_id),
            field_line("Title", self.title),
            field_line("Company", self.company),
            field_line("Location", self.location),
            field_line("Description", self.description),
            field_line("Skills", self.skills),
            field_line("Salary", self.salary),
        ])
