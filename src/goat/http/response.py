"""
=============================================================================
HTTP RESPONSE PARSER
=============================================================================

Parses the raw bytes a server sent back into a structured HTTPResponse.

=============================================================================
HTTP RESPONSE ANATOMY
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                     HTTP RESPONSE STRUCTURE                         │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │  ┌─ STATUS LINE ──────────────────────────────────────────────────┐ │
    │  │                                                                 │ │
    │  │    HTTP/1.0 200 OK\r\n                                          │ │
    │  │    ───┬──── ─┬─ ─┬                                              │ │
    │  │       │      │   │                                              │ │
    │  │    Version Status Explanation                                   │ │
    │  │                                                                 │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    │  ┌─ HEADERS ──────────────────────────────────────────────────────┐ │
    │  │                                                                 │ │
    │  │    Content-Type: text/html\r\n                                  │ │
    │  │    Content-Length: 13\r\n                                       │ │
    │  │                                                                 │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    │  ┌─ EMPTY LINE (separator) ───────────────────────────────────────┐ │
    │  │    \r\n                                                         │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    │  ┌─ BODY (everything until the server closes) ────────────────────┐ │
    │  │    <h1>Hi!</h1>                                                 │ │
    │  └─────────────────────────────────────────────────────────────────┘ │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
PARSING RULES
=============================================================================

1. STATUS LINE: split on the first two spaces into version, status, and
   explanation. The explanation may contain spaces ("404 Not Found") or
   be missing entirely ("HTTP/1.0 200"). The line terminator is not part
   of it.

2. HEADERS: split each line on the FIRST colon ("Date: 10:00" keeps its
   second colon in the value), lowercase the name, drop leading
   whitespace from the value. A repeated header overwrites the earlier
   one.

3. LINE ENDINGS: CRLF is standard, but bare LF is accepted too.

4. BODY: raw bytes, untouched. No Content-Encoding or Transfer-Encoding
   decoding. None when nothing follows the header block.

=============================================================================
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional
import re

from ..errors import ProtocolError


@dataclass(frozen=True)
class HTTPResponse:
    """
    A parsed HTTP response.

    Attributes:
        version:     HTTP version from the status line ("HTTP/1.0").
        status:      Three-digit status code as sent ("200").
        explanation: Reason phrase ("OK"); "" if the server sent none.
        headers:     Header name (lowercase) → value, read-only.
        body:        Raw body bytes, or None if the server sent no body.
    """

    version: str
    status: str
    explanation: str = ""
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None

    def __post_init__(self):
        # Copied, so later edits to the caller's dict do not leak in
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def status_code(self) -> int:
        """The status as an integer (200, 404, ...)."""
        return int(self.status)

    @property
    def status_line(self) -> str:
        """The status line reassembled, without a line terminator."""
        return f"{self.version} {self.status} {self.explanation}".rstrip()

    @property
    def is_success(self) -> bool:
        """True for 2xx responses."""
        return 200 <= self.status_code < 300

    @property
    def content_type(self) -> Optional[str]:
        """
        The Content-Type media type without parameters.

        "text/html; charset=utf-8" → "text/html"
        """
        ct = self.headers.get("content-type", "")
        return ct.split(";")[0].strip().lower() or None

    @property
    def text(self) -> str:
        """The body decoded as UTF-8; undecodable bytes are replaced."""
        if not self.body:
            return ""
        return self.body.decode("utf-8", errors="replace")

    def get_header(self, name: str, default: str = "") -> str:
        """
        Get a header value (case-insensitive lookup).

        Example:
            response.get_header("Content-Type")
            # Works because headers are stored lowercase
        """
        return self.headers.get(name.lower(), default)


class ResponseParser:
    """
    Parses raw HTTP response bytes into HTTPResponse objects.

    ==========================================================================
    PARSER ARCHITECTURE
    ==========================================================================

        Raw Response Bytes (read until EOF)
              │
              ▼
        ┌───────────────────────────────────────────────────────────────────┐
        │  1. Find Header/Body Separator (\r\n\r\n or \n\n)                 │
        │     │  Not found? → whole input is the header block, no body      │
        │     ▼                                                             │
        │  2. Parse Status Line                                             │
        │     │  VERSION SP STATUS [SP EXPLANATION]                         │
        │     │  Invalid or missing? → ProtocolError                        │
        │     ▼                                                             │
        │  3. Parse Headers                                                 │
        │     │  "Name: Value" pairs, names lowercased                      │
        │     │  No colon? → ProtocolError                                  │
        │     ▼                                                             │
        │  4. Remaining bytes are the body                                  │
        └───────────────────────────────────────────────────────────────────┘
              │
              ▼
        HTTPResponse dataclass

    ==========================================================================
    """

    STATUS_LINE_PATTERN = re.compile(r"^(HTTP/\d+\.\d+) (\d{3})(?: (.*))?$")
    HEADER_PATTERN = re.compile(r"^([^:]+):[ \t]*(.*)$")
    LINE_BREAK = re.compile(r"\r?\n")

    SEPARATORS = (b"\r\n\r\n", b"\n\n")

    def parse(self, data: bytes) -> HTTPResponse:
        """
        Parse a complete HTTP response.

        Args:
            data: Everything read from the socket until EOF.

        Returns:
            Parsed HTTPResponse.

        Raises:
            ProtocolError: If there is no valid status line, or a header
                           line is malformed.
        """
        if not data:
            raise ProtocolError("Empty response")

        # =====================================================================
        # STEP 1: Split headers and body at the blank line
        # =====================================================================
        header_bytes, body = self._split_head(data)
        header_section = header_bytes.decode("utf-8", errors="replace").rstrip("\r")

        lines = self.LINE_BREAK.split(header_section)

        # =====================================================================
        # STEP 2: Status line
        # =====================================================================
        version, status, explanation = self._parse_status_line(lines[0])

        # =====================================================================
        # STEP 3: Headers
        # =====================================================================
        headers = self._parse_headers(lines[1:])

        return HTTPResponse(
            version=version,
            status=status,
            explanation=explanation,
            headers=headers,
            body=body or None,
        )

    def _split_head(self, data: bytes) -> tuple[bytes, bytes]:
        """
        Split at the first blank line, whichever line ending it uses.

        A response cut off before the blank line is all head and no body.
        """
        best = None
        for separator in self.SEPARATORS:
            index = data.find(separator)
            if index != -1 and (best is None or index < best[0]):
                best = (index, separator)

        if best is None:
            return data, b""

        index, separator = best
        return data[:index], data[index + len(separator):]

    def _parse_status_line(self, line: str) -> tuple[str, str, str]:
        match = self.STATUS_LINE_PATTERN.match(line)
        if not match:
            raise ProtocolError(f"Invalid status line: {line!r}")

        version, status, explanation = match.groups()
        return version, status, explanation or ""

    def _parse_headers(self, lines: list[str]) -> Dict[str, str]:
        """
        Parse header lines into a dictionary.

        Obsolete line folding is supported: a line starting with a space
        or tab continues the previous header's value.
        """
        headers: Dict[str, str] = {}
        current_name = None

        for line in lines:
            if not line:
                continue

            if line[0] in (" ", "\t"):
                if current_name is None:
                    raise ProtocolError(f"Continuation line before any header: {line!r}")
                headers[current_name] += " " + line.strip()
                continue

            match = self.HEADER_PATTERN.match(line)
            if not match:
                raise ProtocolError(f"Invalid header line: {line!r}")

            name, value = match.groups()
            current_name = name.strip().lower()

            # Last write wins for repeated headers
            headers[current_name] = value

        return headers


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

def parse_response(data: bytes) -> HTTPResponse:
    """
    Convenience function to parse an HTTP response.

    Creates a ResponseParser and parses the data in one call.
    """
    return ResponseParser().parse(data)
