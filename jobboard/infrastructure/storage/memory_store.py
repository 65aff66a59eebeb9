"""
Memory Store - Thread-safe in-memory job board store.

A single re-entrant lock guards both collections and both ID counters.
Every public method holds it for its whole body, and listings return
copies taken under the lock.
"""

import dataclasses
import itertools
import logging
import threading
from typing import Optional

from jobboard.application.interfaces import StorePort
from jobboard.domain.entities import Application, ApplicationStatus, JobPosting
from jobboard.domain.exceptions import ApplicationNotFoundError, JobNotFoundError
from jobboard.domain.services import IdentityService


logger = logging.getLogger(__name__)


class MemoryStore(StorePort):
    """
    In-memory store shared by all connections.

    Job IDs render as ``<job_id_prefix><n>`` and application IDs as
    ``<application_id_prefix><n>``, with independent counters starting
    at 1. IDs are never reused.
    """

    def __init__(
        self,
        identity: Optional[IdentityService] = None,
        job_id_prefix: str = "JOB",
        application_id_prefix: str = "APP",
    ) -> None:
        """
        Initialize an empty store.

        Args:
            identity: Resolves blank job seeker IDs. Defaults to IdentityService().
            job_id_prefix: Prefix for job posting IDs.
            application_id_prefix: Prefix for application IDs.
        """
        self.identity = identity or IdentityService()
        self.job_id_prefix = job_id_prefix
        self.application_id_prefix = application_id_prefix

        self._lock = threading.RLock()
        self._job_postings: dict[str, JobPosting] = {}
        self._applications: dict[str, Application] = {}
        self._job_counter = itertools.count(1)
        self._application_counter = itertools.count(1)

    # ==================== Job Posting Operations ====================

    def create_job_posting(
        self,
        title: str,
        company: str,
        location: str,
        description: str,
        skills: str,
        salary: str,
    ) -> str:
        """Create a job posting and return its ID."""
        with self._lock:
            job_id = f"{self.job_id_prefix}{next(self._job_counter)}"
            self._job_postings[job_id] = JobPosting(
                job_id=job_id,
                title=title,
                company=company,
                location=location,
                description=description,
                skills=skills,
                salary=salary,
            )
        logger.info(f"Created job posting {job_id}")
        return job_id

    def get_job_posting(self, job_id: str) -> Optional[JobPosting]:
        """Get a job posting by ID."""
        with self._lock:
            return self._job_postings.get(job_id)

    def list_job_postings(self) -> list[JobPosting]:
        """Snapshot of all postings in creation order."""
        # Postings are frozen, so a shallow copy of the list is a snapshot
        with self._lock:
            return list(self._job_postings.values())

    # ==================== Application Operations ====================

    def create_application(self, job_id: str, job_seeker_id: str, resume: str) -> str:
        """
        Create a pending application and return its ID.

        Raises:
            JobNotFoundError: If job_id does not exist. Nothing is inserted.
        """
        with self._lock:
            if job_id not in self._job_postings:
                raise JobNotFoundError(job_id)

            application_id = (
                f"{self.application_id_prefix}{next(self._application_counter)}"
            )
            self._applications[application_id] = Application(
                application_id=application_id,
                job_seeker_id=self.identity.resolve(job_seeker_id),
                job_id=job_id,
                status=ApplicationStatus.PENDING,
                resume=resume,
            )
        logger.info(f"Created application {application_id} for {job_id}")
        return application_id

    def get_application(self, application_id: str) -> Optional[Application]:
        """Get a copy of an application by ID."""
        with self._lock:
            application = self._applications.get(application_id)
            return dataclasses.replace(application) if application else None

    def update_application_status(
        self,
        application_id: str,
        status: ApplicationStatus,
    ) -> None:
        """
        Overwrite an application's status. Any transition is allowed.

        Raises:
            ApplicationNotFoundError: If application_id does not exist.
        """
        with self._lock:
            application = self._applications.get(application_id)
            if application is None:
                raise ApplicationNotFoundError(application_id)
            previous = application.status
            application.status = status
        logger.info(
            f"Application {application_id}: {previous.label} -> {status.label}"
        )

    def list_all_applications(self) -> list[Application]:
        """Snapshot of all applications in creation order."""
        with self._lock:
            return [dataclasses.replace(a) for a in self._applications.values()]

    def list_applications_for_job_seeker(self, job_seeker_id: str) -> list[Application]:
        """Snapshot of one job seeker's applications in creation order."""
        with self._lock:
            return [
                dataclasses.replace(a)
                for a in self._applications.values()
                if a.job_seeker_id == job_seeker_id
            ]

