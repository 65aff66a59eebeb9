"""
Unit tests for IdentityService.
"""

from jobboard.domain.services import IdentityService


class TestIdentityService:
    """Tests for job seeker identity resolution."""

    def test_keeps_supplied_id(self):
        assert IdentityService().resolve("seeker-42") == "seeker-42"

    def test_strips_supplied_id(self):
        assert IdentityService().resolve("  seeker-42 ") == "seeker-42"

    def test_synthesizes_for_blank_id(self):
        """Blank IDs get prefix plus eight hex characters."""
        resolved = IdentityService().resolve("   ")

        assert resolved.startswith("JS")
        assert len(resolved) == 2 + IdentityService.SUFFIX_LENGTH
        int(resolved[2:], 16)

    def test_custom_prefix(self):
        assert IdentityService(prefix="ANON-").synthesize().startswith("ANON-")

    def test_synthesized_ids_differ(self):
        service = IdentityService()
        ids = {service.synthesize() for _ in range(200)}
        assert len(ids) == 200
