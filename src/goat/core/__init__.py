"""
=============================================================================
CORE NETWORKING MODULE
=============================================================================

Low-level pieces the HTTP client is built on:

    Transport / SocketTransport  Resolve a host and open a TCP stream
    Connection                   Scoped socket: send all, read to EOF, close
    FetchLog                     Structured access-log entry per fetch

=============================================================================
"""

from .access_log import FetchLog
from .connection import Connection, ConnectionState
from .transport import SocketTransport, Transport

__all__ = [
    "Connection",
    "ConnectionState",
    "FetchLog",
    "SocketTransport",
    "Transport",
]
