"""
JobBoard Client - Thin protocol client.

Sends command frames and reads responses up to the sentinel. Menus and
prompts are left to whatever front end drives it.
"""

import logging
import socket
from typing import Optional, Sequence, TextIO, Union

from jobboard.domain.value_objects import Payload
from .framing import LINE_TERMINATOR, SENTINEL, strip_terminator


logger = logging.getLogger(__name__)


class JobBoardClient:
    """
    Client for one persistent connection to a job board server.

    Usage:
        with JobBoardClient("localhost", 5000) as client:
            print(client.send_command(Command.VIEW_JOBS))
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 5000,
        timeout: Optional[float] = None,
        encoding: str = "utf-8",
    ) -> None:
        """
        Initialize the client. Nothing is connected until connect().

        Args:
            host: Server host.
            port: Server port.
            timeout: Socket timeout in seconds (None blocks).
            encoding: Text encoding of wire lines.
        """
        self.host = host
        self.port = port
        self.timeout = timeout
        self.encoding = encoding
        self._socket: Optional[socket.socket] = None
        self._reader: Optional[TextIO] = None
        self._writer: Optional[TextIO] = None

    def connect(self) -> None:
        """Open the connection."""
        if self._socket is not None:
            return
        self._socket = socket.create_connection((self.host, self.port), timeout=self.timeout)
        self._reader = self._socket.makefile("r", encoding=self.encoding, newline="\n")
        self._writer = self._socket.makefile("w", encoding=self.encoding, newline="\n")
        logger.debug(f"Connected to {self.host}:{self.port}")

    def close(self) -> None:
        """Close the connection."""
        for resource in (self._writer, self._reader, self._socket):
            if resource is None:
                continue
            try:
                resource.close()
            except OSError as e:
                logger.debug(f"Error closing connection: {e}")
        self._socket = self._reader = self._writer = None

    def send_command(self, code: int) -> str:
        """Send a bare command and return the response body."""
        self._send_lines(str(int(code)))
        return self._read_response()

    def send_command_with_data(self, code: int, data: Union[str, Sequence[str]]) -> str:
        """
        Send a command followed by its data line.

        Args:
            code: Command code.
            data: Raw data line, or field values to encode.

        Returns:
            Response body.
        """
        line = data if isinstance(data, str) else Payload.of(*data).encode()
        self._send_lines(str(int(code)), line)
        return self._read_response()

    def _send_lines(self, *lines: str) -> None:
        if self._writer is None:
            raise ConnectionError("Client not connected. Call connect() first.")
        self._writer.write("".join(line + LINE_TERMINATOR for line in lines))
        self._writer.flush()

    def _read_response(self) -> str:
        body: list[str] = []
        while True:
            line = self._reader.readline()
            if not line:
                raise ConnectionError("Server closed the connection mid-response")
            line = strip_terminator(line)
            if line == SENTINEL:
                return "\n".join(body)
            body.append(line)

    def __enter__(self) -> "JobBoardClient":
        self.connect()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
