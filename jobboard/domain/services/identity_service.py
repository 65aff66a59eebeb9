"""
Identity Service - Resolves who submitted an application.

The protocol carries no authenticated identity. A job seeker may embed
an ID in the application payload; when it is blank an anonymous ID is
synthesized. Replacing this service is the single point where a real
authentication layer would plug in.
"""

import uuid


class IdentityService:
    """Resolve caller-supplied job seeker IDs, synthesizing a fallback."""

    DEFAULT_PREFIX = "JS"
    SUFFIX_LENGTH = 8

    def __init__(self, prefix: str = DEFAULT_PREFIX) -> None:
        """
        Initialize the service.

        Args:
            prefix: Prefix for synthesized job seeker IDs.
        """
        self.prefix = prefix

    def synthesize(self) -> str:
        """Create a fresh anonymous job seeker ID (e.g., "JS1a2b3c4d")."""
        return f"{self.prefix}{uuid.uuid4().hex[:self.SUFFIX_LENGTH]}"

    def resolve(self, job_seeker_id: str) -> str:
        """
        Return the effective job seeker ID for an application.

        Args:
            job_seeker_id: ID sent by the client, possibly blank.

        Returns:
            The stripped ID, or a synthesized one if it was blank.
        """
        job_seeker_id = (job_seeker_id or "").strip()
        return job_seeker_id or self.synthesize()
