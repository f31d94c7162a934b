"""
=============================================================================
CONNECTION MANAGEMENT
=============================================================================

This module wraps the raw client socket for one request/response
exchange.

=============================================================================
TCP IS A BYTE STREAM, NOT A MESSAGE PROTOCOL!
=============================================================================

TCP does NOT preserve message boundaries. A response the server wrote in
one piece may arrive as many recv() chunks:

    recv() → "HTTP/1.0 200 OK\r\nConte"
    recv() → "nt-Type: text/html\r\n\r\n<h1>"
    recv() → "Hi!</h1>"
    recv() → ""                              ← server closed: EOF

For HTTP/1.0 the end of the response IS the end of the stream. There is
no keep-alive, so the client keeps calling recv() and buffering until
recv() returns b"", then hands the whole buffer to the parser.

=============================================================================
CONNECTION LIFECYCLE
=============================================================================

    ┌─────────┐  send_request()  ┌─────────┐  read_response()  ┌─────────┐
    │   NEW   │ ───────────────► │ WRITING │ ────────────────► │ READING │
    └─────────┘                  └─────────┘                   └────┬────┘
         │                                                          │
         │                  close() / __exit__                      │
         └─────────────────────────┬────────────────────────────────┘
                                   ▼
                              ┌─────────┐
                              │ CLOSED  │
                              └─────────┘

The socket is a scoped resource: use Connection as a context manager and
it is closed on every exit path, success or exception.

=============================================================================
"""

import logging
import socket
import time
import uuid
from dataclasses import dataclass, field
from enum import Enum

from ..errors import ProtocolError


logger = logging.getLogger(__name__)


class ConnectionState(Enum):
    """Connection lifecycle states."""
    NEW = "new"              # Connected, nothing sent yet
    WRITING = "writing"      # Sending the request
    READING = "reading"      # Reading the response until EOF
    CLOSED = "closed"        # Socket released


@dataclass
class Connection:
    """
    One client socket, used for exactly one exchange.

    Attributes:
        socket: The connected socket (from a Transport).
        host: Host the socket was opened to (for logging).
        port: Port the socket was opened to (for logging).
        id: Short connection identifier (for logging).
        state: Current connection state.
        created_at: Timestamp when the connection was wrapped.
        bytes_sent: Request bytes written.
        bytes_received: Response bytes read.
    """

    socket: socket.socket
    host: str = ""
    port: int = 0

    id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])
    state: ConnectionState = ConnectionState.NEW
    created_at: float = field(default_factory=time.time)
    bytes_sent: int = 0
    bytes_received: int = 0

    # Configuration (passed from ClientConfig)
    buffer_size: int = 8192
    max_response_size: int = 10 * 1024 * 1024

    @property
    def age(self) -> float:
        """Seconds since the connection was wrapped."""
        return time.time() - self.created_at

    # =========================================================================
    # WRITING
    # =========================================================================

    def send_request(self, data: bytes) -> None:
        """
        Send the whole request.

        sendall() blocks until every byte is written; a plain send()
        could write only part of it.

        Raises:
            OSError: If the peer went away while writing.
        """
        self.state = ConnectionState.WRITING
        self.socket.sendall(data)
        self.bytes_sent += len(data)
        logger.debug(f"[{self.id}] Sent {len(data)} bytes to {self.host}:{self.port}")

    # =========================================================================
    # READING
    # =========================================================================

    def read_response(self) -> bytes:
        """
        Read until the server closes the connection.

        A connection reset counts as EOF: whatever arrived before it is
        returned.

        Returns:
            Every byte received.

        Raises:
            ProtocolError: If the response exceeds max_response_size.
            OSError: On other socket errors (including timeouts).
        """
        self.state = ConnectionState.READING
        chunks: list[bytes] = []

        while True:
            chunk = self._recv()
            if not chunk:
                break  # EOF: HTTP/1.0 response complete

            chunks.append(chunk)
            self.bytes_received += len(chunk)

            if self.bytes_received > self.max_response_size:
                raise ProtocolError(
                    f"Response too large: more than {self.max_response_size} bytes"
                )

        logger.debug(f"[{self.id}] Received {self.bytes_received} bytes")
        return b"".join(chunks)

    def _recv(self) -> bytes:
        try:
            return self.socket.recv(self.buffer_size)
        except (ConnectionResetError, BrokenPipeError):
            # Peer dropped the connection; treat as end of stream
            logger.debug(f"[{self.id}] Connection reset by peer")
            return b""

    # =========================================================================
    # CLOSING
    # =========================================================================

    def close(self) -> None:
        """
        Close the socket. Safe to call more than once.
        """
        if self.state == ConnectionState.CLOSED:
            return

        try:
            self.socket.shutdown(socket.SHUT_RDWR)
        except OSError:
            pass  # Peer already gone

        self.socket.close()
        self.state = ConnectionState.CLOSED
        logger.debug(f"[{self.id}] Connection closed after {self.age * 1000:.2f}ms")

    # =========================================================================
    # CONTEXT MANAGER
    # =========================================================================

    def __enter__(self) -> "Connection":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Always close; never suppress the exception."""
        self.close()
        return False
