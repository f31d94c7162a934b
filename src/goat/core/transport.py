"""
=============================================================================
TRANSPORT
=============================================================================

The transport is the one place goat touches DNS and TCP connect. The
HTTP client only asks it for a connected socket:

    transport.connect("example.org", 80)  →  socket.socket

Keeping this behind a small protocol lets tests swap in a transport that
returns one end of a socketpair, or points every host at a local mock
server, without a real DNS lookup.

=============================================================================
RESOLVE, THEN CONNECT
=============================================================================

    getaddrinfo("example.org", 80, SOCK_STREAM)
        │
        ├──► (AF_INET6, ..., ("2606:2800::1", 80, 0, 0))   try → refused
        └──► (AF_INET,  ..., ("93.184.215.14", 80))         try → connected ✓

Each returned address is tried in order until one connects. If none do,
the last error is raised. This is what socket.create_connection() does
internally, written out so resolution can be overridden on its own.

=============================================================================
"""

import logging
import socket
from typing import Optional, Protocol


logger = logging.getLogger(__name__)

AddressInfo = tuple  # (family, type, proto, canonname, sockaddr)


class Transport(Protocol):
    """Anything that can open a byte stream to host:port."""

    def connect(self, host: str, port: int) -> socket.socket:
        """
        Return a connected stream socket.

        Raises:
            OSError: For any resolution or connection failure.
        """
        ...


class SocketTransport:
    """
    TCP transport backed by the socket module.

    Args:
        timeout: Socket timeout in seconds for connect and all later I/O.
                 None = blocking.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def resolve(self, host: str, port: int) -> list[AddressInfo]:
        """
        Resolve host:port to candidate stream addresses.

        Raises:
            socket.gaierror: If the name does not resolve.
        """
        return socket.getaddrinfo(host, port, type=socket.SOCK_STREAM)

    def connect(self, host: str, port: int) -> socket.socket:
        last_error: Optional[OSError] = None

        for family, sock_type, proto, _, address in self.resolve(host, port):
            sock = socket.socket(family, sock_type, proto)
            try:
                sock.settimeout(self.timeout)
                sock.connect(address)
            except OSError as e:
                logger.debug(f"Connect to {address} failed: {e}")
                sock.close()
                last_error = e
                continue

            logger.debug(f"Connected to {host}:{port} via {address}")
            return sock

        if last_error is not None:
            raise last_error
        raise OSError(f"No addresses found for {host}:{port}")
