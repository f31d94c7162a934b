"""
URL parsing: the tokenizer, the Url variants, and the parser itself.
"""

from .models import (
    DEFAULT_PORTS,
    SCHEMES,
    WEB_SCHEMES,
    DataUrl,
    FileUrl,
    Url,
    ViewSourceUrl,
    WebUrl,
    default_port,
)
from .parser import URLParser, parse_url
from .splitter import Splitter

__all__ = [
    "DEFAULT_PORTS",
    "SCHEMES",
    "WEB_SCHEMES",
    "DataUrl",
    "FileUrl",
    "Splitter",
    "URLParser",
    "Url",
    "ViewSourceUrl",
    "WebUrl",
    "default_port",
    "parse_url",
]
