"""
pytest configuration and fixtures.
"""

import socket
import threading
from typing import Callable, Generator, Optional
import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from goat import ClientConfig


@pytest.fixture
def sample_html_response() -> bytes:
    """Sample HTTP/1.0 response with an HTML body."""
    body = b"<html><body><h1>Hello, goat!</h1></body></html>"
    return (
        b"HTTP/1.0 200 OK\r\n"
        b"Content-Type: text/html\r\n"
        b"Content-Length: %d\r\n"
        b"Server: MockServer/1.0\r\n"
        b"\r\n" % len(body)
    ) + body


@pytest.fixture
def config() -> ClientConfig:
    """Default test client configuration."""
    return ClientConfig(timeout=5.0, user_agent="goat-test")


@pytest.fixture
def free_port() -> int:
    """Get a free port for testing."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(('127.0.0.1', 0))
        return s.getsockname()[1]


class MockServer:
    """
    One-shot HTTP server running in a background thread.

    Accepts a single connection, records the request head, replies with
    canned bytes, and closes (HTTP/1.0 close-delimited framing).
    """

    def __init__(self, response: bytes):
        self.response = response
        self.request: Optional[bytes] = None
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        self._socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._socket.bind(('127.0.0.1', 0))
        self._socket.listen(1)
        self._socket.settimeout(5.0)
        self.port = self._socket.getsockname()[1]
        self._thread: Optional[threading.Thread] = None

    def start(self):
        """Start serving in a background thread."""
        self._thread = threading.Thread(target=self._serve_once, daemon=True)
        self._thread.start()

    def _serve_once(self):
        try:
            client, _ = self._socket.accept()
        except OSError:
            return

        with client:
            client.settimeout(5.0)
            data = b""
            while b"\r\n\r\n" not in data:
                chunk = client.recv(1024)
                if not chunk:
                    break
                data += chunk
            self.request = data
            client.sendall(self.response)

    def stop(self):
        """Stop the server."""
        if self._thread and self._thread.is_alive():
            self._thread.join(timeout=5.0)
        self._socket.close()


@pytest.fixture
def mock_server(sample_html_response: bytes) -> Generator[MockServer, None, None]:
    """A started MockServer that answers with sample_html_response."""
    server = MockServer(sample_html_response)
    server.start()

    yield server

    server.stop()


class StaticTransport:
    """Transport that sends every host to one local address (no DNS)."""

    def __init__(self, port: int, host: str = "127.0.0.1"):
        self.address = (host, port)
        self.calls: list[tuple[str, int]] = []

    def connect(self, host: str, port: int) -> socket.socket:
        self.calls.append((host, port))
        return socket.create_connection(self.address, timeout=5.0)


class SocketPairTransport:
    """
    Transport backed by socket.socketpair().

    The canned response is written to the server end up front, and its
    write side is shut down so the client sees EOF after the response.
    """

    def __init__(self, response: bytes):
        self.response = response
        self.server_end: Optional[socket.socket] = None

    def connect(self, host: str, port: int) -> socket.socket:
        client_end, self.server_end = socket.socketpair()
        self.server_end.sendall(self.response)
        self.server_end.shutdown(socket.SHUT_WR)
        return client_end

    def sent_request(self) -> bytes:
        """Everything the client wrote before closing its end."""
        data = b""
        while True:
            chunk = self.server_end.recv(4096)
            if not chunk:
                break
            data += chunk
        return data

    def close(self):
        if self.server_end is not None:
            self.server_end.close()


@pytest.fixture
def make_pair_transport() -> Generator[Callable[[bytes], SocketPairTransport], None, None]:
    """Factory for SocketPairTransports answering with given bytes."""
    created: list[SocketPairTransport] = []

    def factory(response: bytes) -> SocketPairTransport:
        transport = SocketPairTransport(response)
        created.append(transport)
        return transport

    yield factory

    for transport in created:
        transport.close()


@pytest.fixture
def pair_transport(
    make_pair_transport: Callable[[bytes], SocketPairTransport],
    sample_html_response: bytes,
) -> SocketPairTransport:
    """A SocketPairTransport answering with sample_html_response."""
    return make_pair_transport(sample_html_response)


@pytest.fixture
def static_transport(mock_server: MockServer) -> StaticTransport:
    """A StaticTransport pointing every host at mock_server."""
    return StaticTransport(mock_server.port)
