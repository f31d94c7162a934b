"""
=============================================================================
HTTP PROTOCOL MODULE
=============================================================================

The wire format goat speaks: the GET request it writes, and the response
it reads back.

    from goat.http import HTTPRequest, HTTPResponse, parse_response

    request = HTTPRequest.for_url(url)
    sock.sendall(request.to_bytes())
    ...
    response = parse_response(raw_bytes)
    response.status, response.headers["content-type"], response.body

=============================================================================
"""

from .request import HTTPRequest
from .response import HTTPResponse, ResponseParser, parse_response

__all__ = [
    "HTTPRequest",
    "HTTPResponse",
    "ResponseParser",
    "parse_response",
]
