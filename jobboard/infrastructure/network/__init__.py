# Network Package
from .framing import SENTINEL
from .connection_handler import ConnectionHandler
from .listener import Listener
from .client import JobBoardClient

__all__ = ["SENTINEL", "ConnectionHandler", "Listener", "JobBoardClient"]
