"""
=============================================================================
ERROR TAXONOMY
=============================================================================

Every failure the library can report is a subclass of GoatError, split
along the two halves of the package:

    GoatError
    ├── URLParseError          Raw string could not become a Url
    │   ├── MalformedUrl       Missing ':' / '//' / ',' delimiter, empty host
    │   ├── UnsupportedScheme  Scheme outside http/https/file/data/view-source
    │   └── InvalidPort        Port segment is not an integer in 1..65535
    └── FetchError             The HTTP exchange failed
        ├── ConnectError       Resolution / connect / socket I/O failure
        └── ProtocolError      Response bytes are not a valid HTTP message

Errors are raised to the immediate caller. Nothing is retried, and the
library never exits the process; the CLI maps errors to exit codes.

Like HTTPParseError in a server, each exception carries the metadata a
caller needs to report it (the offending URL, scheme, port, or address).
=============================================================================
"""

from typing import Optional


class GoatError(Exception):
    """Base class for every error raised by goat."""


# =============================================================================
# URL PARSING
# =============================================================================

class URLParseError(GoatError):
    """
    Raised when a raw string cannot be parsed into a Url.

    Attributes:
        url: The raw input that failed to parse (may be None when the
             error is raised outside of parse_url).
    """

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class MalformedUrl(URLParseError):
    """A required delimiter is missing or a required field is empty."""


class UnsupportedScheme(URLParseError):
    """The scheme is not one goat knows how to handle here."""

    def __init__(self, scheme: str, url: Optional[str] = None, message: Optional[str] = None):
        super().__init__(message or f"Unsupported scheme: {scheme!r}", url)
        self.scheme = scheme


class InvalidPort(URLParseError):
    """The port segment is present but is not a valid TCP port."""

    def __init__(self, port: str, url: Optional[str] = None):
        super().__init__(f"Invalid port: {port!r}", url)
        self.port = port


# =============================================================================
# FETCHING
# =============================================================================

class FetchError(GoatError):
    """Base class for failures of the HTTP exchange."""


class ConnectError(FetchError):
    """
    Transport-level failure talking to host:port.

    The underlying OSError (socket.gaierror, ConnectionRefusedError, ...)
    is chained as __cause__ with ``raise ConnectError(...) from exc``.
    """

    def __init__(self, host: str, port: int, reason: str = ""):
        message = f"Could not connect to {host}:{port}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.host = host
        self.port = port


class ProtocolError(FetchError):
    """The response could not be parsed into a status line and headers."""
