"""
Listener - Accepts client connections.

One accept loop; every accepted socket is served by a ConnectionHandler
on its own daemon thread, all sharing one CommandProcessor.
"""

import logging
import socket
import threading
from typing import Optional

from jobboard.application.use_cases import CommandProcessor
from jobboard.domain.exceptions import ListenerError
from .connection_handler import ConnectionHandler


logger = logging.getLogger(__name__)


class Listener:
    """
    TCP listener with a thread-per-connection model.

    The accept loop wakes every ``poll_interval`` seconds to check the
    running flag, so ``stop()`` returns promptly from any thread.
    """

    def __init__(
        self,
        processor: CommandProcessor,
        host: str = "0.0.0.0",
        port: int = 5000,
        backlog: int = 50,
        poll_interval: float = 0.5,
        encoding: str = "utf-8",
    ) -> None:
        """
        Initialize the listener. Nothing is bound until bind()/start().

        Args:
            processor: Command processor shared by all connections.
            host: Interface to bind.
            port: Port to bind; 0 picks a free port.
            backlog: Listen queue size.
            poll_interval: Accept timeout used to poll the running flag.
            encoding: Text encoding of wire lines.
        """
        self.processor = processor
        self.host = host
        self.port = port
        self.backlog = backlog
        self.poll_interval = poll_interval
        self.encoding = encoding

        self._socket: Optional[socket.socket] = None
        self._thread: Optional[threading.Thread] = None
        self._running = threading.Event()

    @property
    def is_running(self) -> bool:
        """Whether the accept loop should keep going."""
        return self._running.is_set()

    @property
    def address(self) -> tuple[str, int]:
        """Bound (host, port). Raises RuntimeError before bind()."""
        if self._socket is None:
            raise RuntimeError("Listener not bound. Call bind() first.")
        host, port = self._socket.getsockname()[:2]
        return host, port

    def bind(self) -> tuple[str, int]:
        """
        Create, bind and listen on the server socket.

        Returns:
            The bound (host, port).

        Raises:
            ListenerError: If the address cannot be bound.
        """
        if self._socket is not None:
            return self.address

        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            sock.bind((self.host, self.port))
            sock.listen(self.backlog)
            sock.settimeout(self.poll_interval)
        except OSError as e:
            sock.close()
            raise ListenerError(f"Cannot listen on {self.host}:{self.port}: {e}") from e

        self._socket = sock
        self._running.set()
        logger.info(f"Listening on {self.address[0]}:{self.address[1]}")
        return self.address

    def serve_forever(self) -> None:
        """Run the accept loop in the calling thread until stop()."""
        self.bind()
        sock = self._socket
        while self.is_running:
            try:
                conn, address = sock.accept()
            except socket.timeout:
                continue
            except OSError as e:
                if self.is_running:
                    logger.error(f"Error accepting client connection: {e}")
                    continue
                break
            self._spawn(conn, address)
        logger.info("Accept loop stopped")

    def start(self) -> tuple[str, int]:
        """
        Bind and run the accept loop on a background thread.

        Returns:
            The bound (host, port).
        """
        address = self.bind()
        self._thread = threading.Thread(
            target=self.serve_forever,
            name="jobboard-listener",
            daemon=True,
        )
        self._thread.start()
        return address

    def stop(self, timeout: Optional[float] = None) -> None:
        """Stop accepting and close the listening socket."""
        self._running.clear()
        sock, self._socket = self._socket, None
        if sock is not None:
            try:
                sock.close()
            except OSError as e:
                logger.error(f"Error closing server socket: {e}")
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout if timeout is not None else self.poll_interval * 4)
            self._thread = None

    def _spawn(self, conn: socket.socket, address: tuple) -> None:
        conn.setblocking(True)
        handler = ConnectionHandler(conn, address, self.processor, encoding=self.encoding)
        thread = threading.Thread(
            target=handler.run,
            name=f"jobboard-conn-{handler.peer}",
            daemon=True,
        )
        thread.start()

    def __enter__(self) -> "Listener":
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()
