"""
=============================================================================
URL MODELS
=============================================================================

A parsed URL is one of four immutable variants. Each variant holds only
the fields its scheme needs:

    ┌──────────────┬─────────────────────────┬─────────────────────────────┐
    │  Variant     │ Fields                  │ Rendered as                 │
    ├──────────────┼─────────────────────────┼─────────────────────────────┤
    │  WebUrl      │ scheme host port path   │ http://host:port/path       │
    │  FileUrl     │ scheme path             │ file://path                 │
    │  DataUrl     │ scheme mimetype data    │ data://mimetype,data        │
    │  ViewSourceUrl│ inner (a WebUrl)       │ view-source:<inner>         │
    └──────────────┴─────────────────────────┴─────────────────────────────┘

Frozen dataclasses give value equality and hashing for free, and make the
"immutable after construction" contract explicit.

ViewSourceUrl wraps a WebUrl, never the full union: the parser refuses
to build any other combination, so code that unwraps a view-source URL
always gets something it can fetch.
=============================================================================
"""

from dataclasses import dataclass
from typing import Union


HTTP = "http"
HTTPS = "https"
FILE = "file"
DATA = "data"
VIEW_SOURCE = "view-source"

WEB_SCHEMES = frozenset({HTTP, HTTPS})
SCHEMES = frozenset({HTTP, HTTPS, FILE, DATA, VIEW_SOURCE})

DEFAULT_PORTS = {
    HTTP: 80,
    HTTPS: 443,
}


def default_port(scheme: str) -> int:
    """
    Return the well-known port for a web scheme.

    Raises:
        KeyError: If the scheme has no default port.
    """
    return DEFAULT_PORTS[scheme]


@dataclass(frozen=True)
class WebUrl:
    """
    An http/https URL.

    Attributes:
        scheme: "http" or "https".
        host:   Non-empty host name or IPv4 address.
        port:   TCP port (scheme default when the URL had none).
        path:   "" when the URL had no path, otherwise starts with "/".
                Query and fragment text stays inside path, undecoded.
    """

    scheme: str
    host: str
    port: int
    path: str = ""

    @property
    def request_target(self) -> str:
        """Path to put on the request line; servers need at least "/"."""
        return self.path or "/"

    @property
    def address(self) -> tuple[str, int]:
        """The (host, port) pair to connect to."""
        return (self.host, self.port)

    def __str__(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}{self.path}"


@dataclass(frozen=True)
class FileUrl:
    """A file:// URL. The path is kept exactly as written."""

    path: str
    scheme: str = FILE

    def __str__(self) -> str:
        return f"{self.scheme}://{self.path}"


@dataclass(frozen=True)
class DataUrl:
    """A data: URL with its inline payload."""

    mimetype: str
    data: str
    scheme: str = DATA

    def __str__(self) -> str:
        return f"{self.scheme}://{self.mimetype},{self.data}"


@dataclass(frozen=True)
class ViewSourceUrl:
    """A view-source: URL wrapping the web URL whose source is shown."""

    inner: WebUrl

    @property
    def scheme(self) -> str:
        return VIEW_SOURCE

    def __str__(self) -> str:
        return f"{VIEW_SOURCE}:{self.inner}"


Url = Union[WebUrl, FileUrl, DataUrl, ViewSourceUrl]
