"""
=============================================================================
GOAT CLI ENTRY POINT
=============================================================================

    # Parse and print a URL
    python -m goat http://example.org/
    url: http://example.org:80/

    # Parse, then fetch and print the response
    python -m goat --fetch http://example.org/

    # Show the raw source of a page
    python -m goat --fetch view-source:http://localhost:8888/index.html

Exit codes:
    0   Success
    1   The URL did not parse, or the fetch failed
    2   Wrong arguments (argparse prints usage)

=============================================================================
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import __version__
from .client import HTTPClient
from .config import ClientConfig
from .errors import GoatError
from .url import ViewSourceUrl, WebUrl, parse_url


def _setup_logging(config: ClientConfig) -> None:
    """Configure logging based on config."""
    level = getattr(logging, config.log_level.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )
    logging.getLogger("goat").setLevel(level)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main CLI entry point.

    Defaults come from the environment (ClientConfig.from_env); explicit
    flags override them.

    Returns:
        Process exit code.
    """
    parser = argparse.ArgumentParser(
        prog="goat",
        description="Parse a URL and optionally fetch it over HTTP/1.0",
    )

    parser.add_argument("url", help="URL to parse (http, https, file, data, view-source)")

    parser.add_argument(
        "--fetch", "-f",
        action="store_true",
        help="Fetch web and view-source URLs and print the response",
    )

    parser.add_argument(
        "--timeout", "-t",
        type=float,
        default=None,
        help="Socket timeout in seconds (default: none, blocking)",
    )

    parser.add_argument(
        "--log-level", "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level (default: WARNING)",
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"goat {__version__}",
    )

    args = parser.parse_args(argv)

    try:
        config = ClientConfig.from_env()
        if args.timeout is not None:
            config.timeout = args.timeout
        if args.log_level is not None:
            config.log_level = args.log_level
        config.validate()
    except ValueError as e:
        parser.error(str(e))

    _setup_logging(config)

    try:
        url = parse_url(args.url)
        print(f"url: {url}")

        if args.fetch and isinstance(url, (WebUrl, ViewSourceUrl)):
            response = HTTPClient(config).fetch(url)
            if isinstance(url, WebUrl):
                print(response.status_line)
                for name, value in response.headers.items():
                    print(f"{name}: {value}")
                print()
            # view-source shows only the document source
            print(response.text)

    except GoatError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
