# Storage Package
from .memory_store import MemoryStore

__all__ = ["MemoryStore"]
