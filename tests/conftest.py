"""
Shared fixtures.
"""

import pytest

from jobboard.application.use_cases import CommandProcessor
from jobboard.infrastructure.storage import MemoryStore


@pytest.fixture
def store() -> MemoryStore:
    """Create an empty store."""
    return MemoryStore()


@pytest.fixture
def processor(store: MemoryStore) -> CommandProcessor:
    """Create a processor over the store fixture."""
    return CommandProcessor(store)
