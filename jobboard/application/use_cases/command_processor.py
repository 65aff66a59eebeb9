"""
Command Processor - Turns protocol commands into store operations.

Stateless apart from the shared store reference. Every outcome,
including validation failures, is returned as response text; the
connection handler never has to treat a reply as an error.
"""

import logging
from typing import Callable, Iterable

from jobboard.application.interfaces import StorePort
from jobboard.domain.entities import Application, ApplicationStatus, JobPosting
from jobboard.domain.exceptions import NotFoundError, PayloadFormatError
from jobboard.domain.value_objects import Command, Payload, command_name
from jobboard.domain.value_objects.command import (
    hiring_manager_commands,
    job_seeker_commands,
    requires_payload,
)


logger = logging.getLogger(__name__)

JOB_POSTING_FIELDS = ("title", "company", "location", "description", "skills", "salary")
APPLICATION_FIELDS = ("jobId", "jobSeekerId", "resume")

CommandHandler = Callable[[], str]
DataCommandHandler = Callable[[Payload], str]


class CommandProcessor:
    """
    Dispatches command codes to handlers and formats their results.

    Two entry points mirror the wire protocol's frame shapes:
    ``process_command`` for bare command lines and
    ``process_command_with_data`` for commands followed by a data line.
    """

    def __init__(self, store: StorePort) -> None:
        """
        Initialize the processor.

        Args:
            store: Store shared by every connection.
        """
        self.store = store

        self._handlers: dict[int, CommandHandler] = {
            Command.VIEW_JOBS: self._view_jobs,
            Command.VIEW_APPLICATIONS: self._view_applications,
            Command.VIEW_MY_APPLICATIONS: self._ask_for_job_seeker_id,
            Command.SELECT_ROLE: self._select_role,
            Command.ROLE_JOB_SEEKER: self._job_seeker_selected,
            Command.ROLE_HIRING_MANAGER: self._hiring_manager_selected,
        }
        self._data_handlers: dict[int, DataCommandHandler] = {
            Command.POST_JOB: self._post_job,
            Command.APPLY_TO_JOB: self._apply_to_job,
            Command.ACCEPT_APPLICATION: self._accept_application,
            Command.REJECT_APPLICATION: self._reject_application,
            Command.VIEW_MY_APPLICATIONS: self._view_my_applications,
        }

    def requires_payload(self, code: int) -> bool:
        """Check if a data line must be read after this command."""
        return requires_payload(code)

    def process_command(self, code: int) -> str:
        """
        Process a command that carries no data line.

        Returns:
            Response body text.
        """
        logger.debug(f"Processing {command_name(code)}")

        handler = self._handlers.get(code)
        if handler is not None:
            return handler()
        if requires_payload(code):
            return missing_data_message(code)
        return f"Unknown command: {code}"

    def process_command_with_data(self, code: int, data: str) -> str:
        """
        Process a command together with its data line.

        Args:
            code: Command code.
            data: Raw data line, without its terminator.

        Returns:
            Response body text.
        """
        logger.debug(f"Processing {command_name(code)} with {len(data)} bytes of data")

        handler = self._data_handlers.get(code)
        if handler is None:
            return f"Unknown command with data: {code}"

        try:
            return handler(Payload.parse(data))
        except PayloadFormatError as e:
            return f"Error: Malformed payload: {e}"
        except NotFoundError as e:
            return f"Error: {e}"

    # ==================== Listings ====================

    def _view_jobs(self) -> str:
        postings = self.store.list_job_postings()
        return format_listing("Available Jobs:", postings, "No job postings available")

    def _view_applications(self) -> str:
        applications = self.store.list_all_applications()
        return format_listing("All Applications:", applications, "No applications available")

    def _view_my_applications(self, payload: Payload) -> str:
        job_seeker_id = payload.fields[0].strip() if payload.fields else ""
        if not job_seeker_id:
            return self._ask_for_job_seeker_id()

        applications = self.store.list_applications_for_job_seeker(job_seeker_id)
        return format_listing(
            "Your Applications:",
            applications,
            f"No applications found for job seeker ID: {job_seeker_id}",
        )

    # ==================== Session ====================

    def _ask_for_job_seeker_id(self) -> str:
        return "Please provide your job seeker ID"

    def _select_role(self) -> str:
        return (
            f"Please select a role ({int(Command.ROLE_JOB_SEEKER)} for Job Seeker, "
            f"{int(Command.ROLE_HIRING_MANAGER)} for Hiring Manager)"
        )

    def _job_seeker_selected(self) -> str:
        return _role_menu("Job Seeker", job_seeker_commands())

    def _hiring_manager_selected(self) -> str:
        return _role_menu("Hiring Manager", hiring_manager_commands())

    # ==================== Mutations ====================

    def _post_job(self, payload: Payload) -> str:
        if len(payload) != len(JOB_POSTING_FIELDS):
            return _field_count_error("job data", JOB_POSTING_FIELDS, len(payload))

        title, company, location, description, skills, salary = payload.fields
        job_id = self.store.create_job_posting(
            title=title,
            company=company,
            location=location,
            description=description,
            skills=skills,
            salary=salary,
        )
        return f"Job posted successfully with ID: {job_id}"

    def _apply_to_job(self, payload: Payload) -> str:
        if len(payload) != len(APPLICATION_FIELDS):
            return _field_count_error("application data", APPLICATION_FIELDS, len(payload))

        job_id, job_seeker_id, resume = payload.fields
        application_id = self.store.create_application(
            job_id=job_id.strip(),
            job_seeker_id=job_seeker_id.strip(),
            resume=resume,
        )

        lines = [f"Application submitted successfully with ID: {application_id}"]
        application = self.store.get_application(application_id)
        if application is not None:
            lines.append(f"Job seeker ID: {application.job_seeker_id}")
        return "\n".join(lines)

    def _accept_application(self, payload: Payload) -> str:
        return self._update_status(payload, ApplicationStatus.ACCEPTED)

    def _reject_application(self, payload: Payload) -> str:
        return self._update_status(payload, ApplicationStatus.REJECTED)

    def _update_status(self, payload: Payload, status: ApplicationStatus) -> str:
        if len(payload) != 1:
            return _field_count_error("status update", ("applicationId",), len(payload))

        application_id = payload.fields[0].strip()
        self.store.update_application_status(application_id, status)
        return (
            f"Application status updated successfully: "
            f"{application_id} is now {status.label}"
        )


def missing_data_message(code: int) -> str:
    """Reply for a payload command whose data line never arrived."""
    return f"Error: Missing data for command {command_name(code)}"


def format_listing(
    header: str,
    entries: Iterable[JobPosting | Application],
    empty_message: str,
) -> str:
    """Render entries under a header, separated by blank lines."""
    blocks = [entry.display_text for entry in entries]
    if not blocks:
        return empty_message
    return header + "\n" + "\n\n".join(blocks)


def _field_count_error(what: str, expected: tuple[str, ...], got: int) -> str:
    return (
        f"Error: Invalid {what} format "
        f"(expected {len(expected)} fields: {'|'.join(expected)}, got {got})"
    )


def _role_menu(role: str, commands: list[Command]) -> str:
    lines = [f"Role selected: {role}", "Available commands:"]
    lines.extend(f"  {int(c)} - {c.name}" for c in commands)
    return "\n".join(lines)
