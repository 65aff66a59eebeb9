"""
JobBoard - Networked job board server

Entry point for the application.
"""

import logging
import socket
import sys

from pydantic import ValidationError

from jobboard.application.use_cases import CommandProcessor
from jobboard.config.settings import Settings, get_settings
from jobboard.domain.exceptions import ListenerError
from jobboard.domain.services import IdentityService
from jobboard.infrastructure.network import Listener
from jobboard.infrastructure.storage import MemoryStore


logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def local_ip() -> str:
    """Best-effort address of this host for the startup banner."""
    try:
        return socket.gethostbyname(socket.gethostname())
    except OSError:
        return "127.0.0.1"


def build_listener(settings: Settings) -> Listener:
    """Wire the store, processor and listener from settings."""
    store = MemoryStore(
        identity=IdentityService(prefix=settings.job_seeker_id_prefix),
        job_id_prefix=settings.job_id_prefix,
        application_id_prefix=settings.application_id_prefix,
    )
    return Listener(
        CommandProcessor(store),
        host=settings.host,
        port=settings.port,
        backlog=settings.backlog,
        poll_interval=settings.accept_poll_interval,
        encoding=settings.encoding,
    )


def main() -> int:
    """Run the server until interrupted. Returns the process exit code."""
    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logger.error(f"Invalid configuration:\n{e}")
        return 2

    setup_logging(settings.log_level)
    listener = build_listener(settings)

    try:
        host, port = listener.bind()
    except ListenerError as e:
        logger.error(f"Could not start server: {e}")
        return 1

    logger.info("=" * 50)
    logger.info("Starting Job Board Server...")
    logger.info(f"Server IP: {local_ip()} (bound to {host})")
    logger.info(f"Server Port: {port}")
    logger.info("Server is ready to accept connections")
    logger.info("=" * 50)

    try:
        listener.serve_forever()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
    finally:
        listener.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
