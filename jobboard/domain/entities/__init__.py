# Domain Entities
from .job_posting import JobPosting
from .application import Application, ApplicationStatus

__all__ = ["JobPosting", "Application", "ApplicationStatus"]
