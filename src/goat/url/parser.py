"""
=============================================================================
URL PARSER
=============================================================================

Turns a raw string typed by a user into one of the Url variants.

This is deliberately NOT a general RFC 3986 parser. There is no query
parsing, no userinfo, no IPv6 literal brackets, and no percent-decoding.
It understands exactly the schemes a toy browser needs.

=============================================================================
URL ANATOMY
=============================================================================

    http://example.org:8080/index.html
    ─┬──   ─────┬───── ─┬── ─────┬────
     │          │       │        │
   Scheme      Host    Port     Path
               └────┬─────┘
                Authority

    data:text/html,Hello world!
    ─┬── ────┬──── ─────┬──────
   Scheme  Mimetype    Data

    file:///home/user/index.html
    ─┬──    ─────────┬──────────
   Scheme          Path

    view-source:http://localhost:8888/data/index.html
    ─────┬───── ─────────────────┬───────────────────
      Scheme               Inner web URL

=============================================================================
PARSING ALGORITHM
=============================================================================

    Raw string
        │
        ▼
    ┌───────────────────────────────────────────────────────────────────┐
    │  1. Split on the FIRST ':' → scheme, remainder                    │
    │     No ':'? → MalformedUrl                                        │
    │                                                                    │
    │  2. Dispatch on scheme (case-sensitive)                           │
    │     http/https  → strip '//', Splitter("?:/") → host, port, tail  │
    │                   control chars or space in host/tail? → Malformed│
    │     data        → split remainder on first ','                    │
    │     file        → strip '//', rest is the path                    │
    │     view-source → parse remainder recursively, must be web        │
    │     other       → UnsupportedScheme                               │
    └───────────────────────────────────────────────────────────────────┘
        │
        ▼
    Url variant

=============================================================================
PATH NORMALIZATION (web URLs)
=============================================================================

    The trailing slash of the input is preserved exactly:

        http://example.org          →  path ""
        http://example.org/         →  path "/"
        http://example.org/a/b      →  path "/a/b"
        http://example.org/a/b/     →  path "/a/b/"

    An empty path is kept as "" in the model; the HTTP client sends "/"
    on the wire (see WebUrl.request_target).

=============================================================================
"""

import logging
import string

from ..errors import InvalidPort, MalformedUrl, UnsupportedScheme
from .models import (
    DATA,
    FILE,
    VIEW_SOURCE,
    WEB_SCHEMES,
    DataUrl,
    FileUrl,
    Url,
    ViewSourceUrl,
    WebUrl,
    default_port,
)
from .splitter import Splitter


logger = logging.getLogger(__name__)

MAX_PORT = 65535

# ASCII control characters and space never appear unencoded in a host or path
FORBIDDEN_CHARACTERS = frozenset(chr(code) for code in range(0x21)) | {"\x7f"}


class URLParser:
    """
    Parses raw strings into Url values.

    The parser holds no per-call state, so one instance can be shared
    freely between threads. parse_url() uses a module-level instance.
    """

    SCHEME_DELIMITER = ":"
    AUTHORITY_PREFIX = "//"
    DATA_DELIMITER = ","

    # host, optional ':' port, then '/' before the path tail
    AUTHORITY_SPLITTER = Splitter("?:/")

    def parse(self, raw: str) -> Url:
        """
        Parse a raw URL string.

        Args:
            raw: The URL as typed, e.g. "http://example.org/index.html".

        Returns:
            WebUrl, FileUrl, DataUrl or ViewSourceUrl.

        Raises:
            MalformedUrl: A required delimiter is missing.
            UnsupportedScheme: The scheme is not recognized.
            InvalidPort: The port segment is not a valid port.
        """
        scheme, delimiter, remainder = raw.partition(self.SCHEME_DELIMITER)
        if not delimiter:
            raise MalformedUrl(f"Missing scheme delimiter ':' in {raw!r}", raw)

        logger.debug(f"Parsing {scheme!r} URL: {raw!r}")

        if scheme in WEB_SCHEMES:
            return self._parse_web(scheme, remainder, raw)
        if scheme == DATA:
            return self._parse_data(remainder, raw)
        if scheme == FILE:
            return self._parse_file(remainder, raw)
        if scheme == VIEW_SOURCE:
            return self._parse_view_source(remainder, raw)

        raise UnsupportedScheme(scheme, raw)

    # =========================================================================
    # SCHEME HANDLERS
    # =========================================================================

    def _parse_web(self, scheme: str, remainder: str, raw: str) -> WebUrl:
        rest = self._strip_authority_prefix(scheme, remainder, raw)

        host, port_text, tail = self.AUTHORITY_SPLITTER.split(rest)
        if not host:
            raise MalformedUrl(f"Missing host in {raw!r}", raw)

        port = self._parse_port(port_text, scheme, raw)
        self._reject_forbidden(host, raw)
        self._reject_forbidden(tail, raw)

        # ---------------------------------------------------------------------
        # Path normalization: leading slash when non-empty, trailing slash
        # exactly when the input ended with one
        # ---------------------------------------------------------------------
        path = f"/{tail}" if tail else ""
        if rest.endswith("/") and not path.endswith("/"):
            path += "/"

        return WebUrl(scheme=scheme, host=host, port=port, path=path)

    def _parse_data(self, remainder: str, raw: str) -> DataUrl:
        mimetype, delimiter, data = remainder.partition(self.DATA_DELIMITER)
        if not delimiter:
            raise MalformedUrl(f"Missing ',' between mimetype and data in {raw!r}", raw)
        return DataUrl(mimetype=mimetype, data=data)

    def _parse_file(self, remainder: str, raw: str) -> FileUrl:
        path = self._strip_authority_prefix(FILE, remainder, raw)
        return FileUrl(path=path)

    def _parse_view_source(self, remainder: str, raw: str) -> ViewSourceUrl:
        inner = self.parse(remainder)
        if not isinstance(inner, WebUrl):
            raise UnsupportedScheme(
                inner.scheme,
                raw,
                message=f"view-source only wraps http/https URLs, got {inner.scheme!r}",
            )
        return ViewSourceUrl(inner=inner)

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _strip_authority_prefix(self, scheme: str, remainder: str, raw: str) -> str:
        if not remainder.startswith(self.AUTHORITY_PREFIX):
            raise MalformedUrl(f"Expected '{scheme}://' in {raw!r}", raw)
        return remainder[len(self.AUTHORITY_PREFIX):]

    @staticmethod
    def _reject_forbidden(text: str, raw: str) -> None:
        """
        Refuse text that would break the request line or headers.

        "http://h/x\\r\\nX-Injected: 1" must not reach the socket as an
        extra header line.
        """
        for char in text:
            if char in FORBIDDEN_CHARACTERS:
                raise MalformedUrl(f"Illegal character {char!r} in {raw!r}", raw)

    @staticmethod
    def _parse_port(port_text: str, scheme: str, raw: str) -> int:
        """
        Convert the port field to an int.

        An empty field (no ':' or a bare ':') means the scheme default.
        int() alone would accept "+80", " 80" and "8_0", so the digits are
        checked first.
        """
        if not port_text:
            return default_port(scheme)

        if not all(char in string.digits for char in port_text):
            raise InvalidPort(port_text, raw)

        port = int(port_text)
        if not 0 < port <= MAX_PORT:
            raise InvalidPort(port_text, raw)
        return port


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

_parser = URLParser()


def parse_url(raw: str) -> Url:
    """
    Parse a raw URL string with the shared URLParser.

    Example:
        url = parse_url("http://127.0.0.1:1234/")
        url.host, url.port, url.path    # ("127.0.0.1", 1234, "/")
    """
    return _parser.parse(raw)
