"""
=============================================================================
GOAT - URL Parsing and HTTP/1.0 Fetching for a Toy Browser
=============================================================================

The networking front end of a toy browser: take the URL a user typed,
work out what it points at, and, for web URLs, fetch it over a raw
socket.

=============================================================================
ARCHITECTURE
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   "view-source:http://localhost:8888/data/index.html"               │
    │                          │                                           │
    │                          ▼                                           │
    │   ┌──────────────────────────────────────────────────────────────┐  │
    │   │  URL PARSER (goat.url)                                        │  │
    │   │    Splitter state machine → WebUrl / FileUrl / DataUrl /      │  │
    │   │                             ViewSourceUrl                     │  │
    │   └──────────────────────────────┬───────────────────────────────┘  │
    │                                  │ WebUrl                            │
    │                                  ▼                                   │
    │   ┌──────────────────────────────────────────────────────────────┐  │
    │   │  HTTP CLIENT (goat.client)                                    │  │
    │   │    Transport → Connection → GET /path HTTP/1.0 → read to EOF  │  │
    │   │    → ResponseParser                                           │  │
    │   └──────────────────────────────┬───────────────────────────────┘  │
    │                                  ▼                                   │
    │                             HTTPResponse                             │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
USAGE
=============================================================================

    from goat import parse_url, fetch

    url = parse_url("http://example.org/")
    print(url)                       # http://example.org:80/

    response = fetch(url)
    print(response.status)           # "200"
    print(response.headers["content-type"])
    print(response.text)

From the shell:

    python -m goat http://example.org/
    python -m goat --fetch view-source:http://example.org/

=============================================================================
"""

__version__ = "0.1.0"

from .client import HTTPClient, fetch
from .config import ClientConfig
from .errors import (
    ConnectError,
    FetchError,
    GoatError,
    InvalidPort,
    MalformedUrl,
    ProtocolError,
    UnsupportedScheme,
    URLParseError,
)
from .http import HTTPResponse
from .url import DataUrl, FileUrl, Url, ViewSourceUrl, WebUrl, parse_url

__all__ = [
    "ClientConfig",
    "ConnectError",
    "DataUrl",
    "FetchError",
    "FileUrl",
    "GoatError",
    "HTTPClient",
    "HTTPResponse",
    "InvalidPort",
    "MalformedUrl",
    "ProtocolError",
    "URLParseError",
    "UnsupportedScheme",
    "Url",
    "ViewSourceUrl",
    "WebUrl",
    "__version__",
    "fetch",
    "parse_url",
]
