"""
=============================================================================
HTTP CLIENT
=============================================================================

Fetches a web URL with a single blocking HTTP/1.0 GET.

=============================================================================
FETCH FLOW
=============================================================================

    fetch(url)
        │
        ├──► Unwrap: ViewSourceUrl → inner WebUrl, str → parse_url()
        │
        ├──► transport.connect(host, port) ──── OSError ──► ConnectError
        │
        │    with Connection(sock):                 ← socket closed on
        │        │                                     every exit path
        │        ├──► send_request(GET ... HTTP/1.0)
        │        ├──► read_response()  (until EOF)
        │        │
        │    parse_response(raw) ──── bad status line ──► ProtocolError
        │
        ▼
    HTTPResponse

Every call owns its socket and buffers; the client keeps no state between
calls, so one HTTPClient can be shared by many threads. Nothing is
retried.

=============================================================================
"""

import logging
import time
from typing import Optional, Union

from .config import ClientConfig
from .core import access_log
from .core.access_log import FetchLog
from .core.connection import Connection
from .core.transport import SocketTransport, Transport
from .errors import ConnectError, UnsupportedScheme
from .http.request import HTTPRequest
from .http.response import HTTPResponse, parse_response
from .url.models import Url, ViewSourceUrl, WebUrl
from .url.parser import parse_url


logger = logging.getLogger(__name__)


class HTTPClient:
    """
    Minimal HTTP/1.0 client.

    Usage:
        client = HTTPClient()
        response = client.fetch(parse_url("http://example.org/"))
        response.status, response.headers["content-type"], response.body

    Args:
        config: Client settings; defaults to ClientConfig().
        transport: Where sockets come from; defaults to a SocketTransport
                   using config.timeout.
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[Transport] = None,
    ):
        self.config = config or ClientConfig()
        self.config.validate()
        self.transport = transport or SocketTransport(timeout=self.config.timeout)

    def fetch(self, url: Union[Url, str]) -> HTTPResponse:
        """
        Fetch a web URL.

        Args:
            url: A WebUrl, a ViewSourceUrl (its inner URL is fetched), or
                 a raw string that parses to one of them.

        Returns:
            The parsed HTTPResponse.

        Raises:
            URLParseError: If a raw string does not parse.
            UnsupportedScheme: For file: and data: URLs.
            ConnectError: If resolution, connect, or socket I/O fails.
            ProtocolError: If the response is not valid HTTP.
        """
        target = self._web_target(url)
        request = HTTPRequest.for_url(target, user_agent=self.config.user_agent)

        start_time = time.time()
        fetch_id = "-"
        raw = b""

        try:
            conn = self._connect(target)
            fetch_id = conn.id

            with conn:
                try:
                    conn.send_request(request.to_bytes())
                    raw = conn.read_response()
                except OSError as e:
                    raise ConnectError(target.host, target.port, str(e)) from e

            response = parse_response(raw)

        except Exception as e:
            self._log(fetch_id, target, None, len(raw), start_time, error=type(e).__name__)
            raise

        self._log(fetch_id, target, response.status, len(response.body or b""), start_time)
        return response

    # =========================================================================
    # HELPERS
    # =========================================================================

    @staticmethod
    def _web_target(url: Union[Url, str]) -> WebUrl:
        if isinstance(url, str):
            url = parse_url(url)

        if isinstance(url, ViewSourceUrl):
            return url.inner
        if isinstance(url, WebUrl):
            return url

        raise UnsupportedScheme(
            url.scheme,
            str(url),
            message=f"Cannot fetch {url.scheme!r} URLs over HTTP",
        )

    def _connect(self, url: WebUrl) -> Connection:
        logger.debug(f"Connecting to {url.host}:{url.port}")
        try:
            sock = self.transport.connect(url.host, url.port)
        except OSError as e:
            raise ConnectError(url.host, url.port, str(e)) from e

        return Connection(
            socket=sock,
            host=url.host,
            port=url.port,
            buffer_size=self.config.buffer_size,
            max_response_size=self.config.max_response_size,
        )

    def _log(
        self,
        fetch_id: str,
        url: WebUrl,
        status: Optional[str],
        content_length: int,
        start_time: float,
        error: Optional[str] = None,
    ) -> None:
        entry = FetchLog(
            fetch_id=fetch_id,
            method="GET",
            url=str(url),
            status=status,
            content_length=content_length,
            duration_ms=(time.time() - start_time) * 1000,
            error=error,
        )
        access_log.emit(entry, self.config.log_format)


# =============================================================================
# CONVENIENCE FUNCTION
# =============================================================================

def fetch(
    url: Union[Url, str],
    config: Optional[ClientConfig] = None,
    transport: Optional[Transport] = None,
) -> HTTPResponse:
    """
    Fetch a URL with a one-off HTTPClient.

    Example:
        response = fetch("http://example.org/")
        print(response.status_line)
        print(response.text)
    """
    return HTTPClient(config=config, transport=transport).fetch(url)
