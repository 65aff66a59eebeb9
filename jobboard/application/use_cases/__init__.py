# Use Cases Package
from .command_processor import CommandProcessor

__all__ = ["CommandProcessor"]
