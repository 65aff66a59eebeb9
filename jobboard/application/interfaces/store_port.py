"""
Store Port - Abstract interface for job board data.

Implementations must be safe to call from many connection threads at
once; each method is one atomic unit.
"""

from abc import ABC, abstractmethod
from typing import Optional

from jobboard.domain.entities import Application, ApplicationStatus, JobPosting


class StorePort(ABC):
    """Abstract interface for the job board store."""

    # Job postings
    @abstractmethod
    def create_job_posting(
        self,
        title: str,
        company: str,
        location: str,
        description: str,
        skills: str,
        salary: str,
    ) -> str:
        """Create a job posting. Returns its new ID."""
        pass

    @abstractmethod
    def get_job_posting(self, job_id: str) -> Optional[JobPosting]:
        """Get a job posting by ID."""
        pass

    @abstractmethod
    def list_job_postings(self) -> list[JobPosting]:
        """Snapshot of all postings in creation order."""
        pass

    # Applications
    @abstractmethod
    def create_application(self, job_id: str, job_seeker_id: str, resume: str) -> str:
        """
        Create a pending application. Returns its new ID.

        Raises:
            JobNotFoundError: If job_id does not exist.
        """
        pass

    @abstractmethod
    def get_application(self, application_id: str) -> Optional[Application]:
        """Get a copy of an application by ID."""
        pass

    @abstractmethod
    def update_application_status(
        self,
        application_id: str,
        status: ApplicationStatus,
    ) -> None:
        """
        Overwrite an application's status.

        Raises:
            ApplicationNotFoundError: If application_id does not exist.
        """
        pass

    @abstractmethod
    def list_all_applications(self) -> list[Application]:
        """Snapshot of all applications in creation order."""
        pass

    @abstractmethod
    def list_applications_for_job_seeker(self, job_seeker_id: str) -> list[Application]:
        """Snapshot of one job seeker's applications in creation order."""
        pass
