"""
=============================================================================
HTTP REQUEST
=============================================================================

Builds the bytes goat sends to a server. goat only ever sends one kind of
request: a bodiless HTTP/1.0 GET.

    GET /index.html HTTP/1.0\r\n        ← Request line
    Host: example.org\r\n               ← Required for virtual hosting
    User-Agent: goat/0.1\r\n
    \r\n                                ← Empty line ends the request

HTTP/1.0 means the server closes the connection after the response, so
the client can read until EOF instead of parsing Content-Length or
chunked framing.
=============================================================================
"""

from dataclasses import dataclass, field
from typing import Dict

from ..config import DEFAULT_USER_AGENT
from ..url.models import WebUrl


@dataclass
class HTTPRequest:
    """
    An outgoing HTTP request.

    Attributes:
        target:  Request target for the request line; never empty.
        host:    Value of the Host header.
        method:  Always "GET" for goat.
        version: Always "HTTP/1.0" for goat.
        headers: Extra headers, written after Host in insertion order.
    """

    target: str
    host: str
    method: str = "GET"
    version: str = "HTTP/1.0"
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def for_url(cls, url: WebUrl, user_agent: str = DEFAULT_USER_AGENT) -> "HTTPRequest":
        """
        Build the GET request for a web URL.

        An empty URL path goes out as "/".
        """
        return cls(
            target=url.request_target,
            host=url.host,
            headers={"User-Agent": user_agent},
        )

    @property
    def request_line(self) -> str:
        """
        Format: METHOD SP REQUEST-TARGET SP HTTP-VERSION
        Example: "GET / HTTP/1.0"
        """
        return f"{self.method} {self.target} {self.version}"

    def to_bytes(self) -> bytes:
        """
        Serialize the request for socket.sendall().

        Returns:
            Request line, Host header, extra headers, then the blank line.

        Raises:
            ValueError: If any line would contain a CR or LF.
        """
        lines = [self.request_line, f"Host: {self.host}"]

        for name, value in self.headers.items():
            lines.append(f"{name}: {value}")

        for line in lines:
            if "\r" in line or "\n" in line:
                raise ValueError(f"Line break inside request line or header: {line!r}")

        # Empty line terminates the header block
        lines.append("")

        return ("\r\n".join(lines) + "\r\n").encode("utf-8")
