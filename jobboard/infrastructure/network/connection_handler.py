"""
Connection Handler - Serves one client socket.

Reads a command line, reads a data line when the command needs one,
dispatches to the shared command processor and writes the framed
response. Holds no state shared with other connections.
"""

import logging
import re
import socket
from typing import Optional, TextIO

from jobboard.application.use_cases import CommandProcessor
from jobboard.application.use_cases.command_processor import missing_data_message
from .framing import frame_response, strip_terminator


logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Error: Internal server error"

# Optional minus sign, then ASCII decimal digits
COMMAND_CODE = re.compile(r"-?[0-9]+", re.ASCII)


class ConnectionHandler:
    """
    Per-connection protocol loop.

    Malformed command lines and missing data lines are answered with an
    error frame and the loop carries on. End of stream ends the loop
    quietly; transport faults end it with a warning.
    """

    def __init__(
        self,
        conn: socket.socket,
        address: tuple,
        processor: CommandProcessor,
        encoding: str = "utf-8",
    ) -> None:
        """
        Initialize the handler.

        Args:
            conn: Accepted client socket. The handler closes it.
            address: Peer address, for logging.
            processor: Command processor shared by all connections.
            encoding: Text encoding of wire lines.
        """
        self.conn = conn
        self.address = address
        self.processor = processor
        self.encoding = encoding
        self._reader: Optional[TextIO] = None
        self._writer: Optional[TextIO] = None

    @property
    def peer(self) -> str:
        """Printable peer address."""
        if isinstance(self.address, tuple) and len(self.address) >= 2:
            return f"{self.address[0]}:{self.address[1]}"
        return str(self.address) or "local"

    def run(self) -> None:
        """Serve the connection until the peer disconnects."""
        logger.info(f"Client connected: {self.peer}")
        try:
            self._reader = self.conn.makefile(
                "r", encoding=self.encoding, errors="replace", newline="\n"
            )
            self._writer = self.conn.makefile(
                "w", encoding=self.encoding, errors="replace", newline="\n"
            )
            self._serve()
        except OSError as e:
            logger.warning(f"Connection error with {self.peer}: {e}")
        finally:
            self._close()
        logger.info(f"Client disconnected: {self.peer}")

    def _serve(self) -> None:
        while True:
            line = self._reader.readline()
            if not line:
                return

            raw = strip_terminator(line)
            if not COMMAND_CODE.fullmatch(raw.strip()):
                logger.debug(f"Malformed command line from {self.peer}: {raw!r}")
                self._respond(f"Error: Invalid command: '{raw}'")
                continue
            code = int(raw.strip())

            data: Optional[str] = None
            if self.processor.requires_payload(code):
                data_line = self._reader.readline()
                if not data_line:
                    self._respond(missing_data_message(code))
                    continue
                data = strip_terminator(data_line)

            self._respond(self._dispatch(code, data))

    def _dispatch(self, code: int, data: Optional[str]) -> str:
        try:
            if data is None:
                return self.processor.process_command(code)
            return self.processor.process_command_with_data(code, data)
        except Exception:
            logger.exception(f"Failed to process command {code} from {self.peer}")
            return INTERNAL_ERROR_MESSAGE

    def _respond(self, body: str) -> None:
        self._writer.write(frame_response(body))
        self._writer.flush()

    def _close(self) -> None:
        for stream in (self._reader, self._writer):
            if stream is None:
                continue
            try:
                stream.close()
            except OSError as e:
                logger.debug(f"Error closing stream for {self.peer}: {e}")
        try:
            self.conn.close()
        except OSError as e:
            logger.debug(f"Error closing socket for {self.peer}: {e}")
