"""
=============================================================================
CLIENT CONFIGURATION
=============================================================================

Centralized configuration for the goat HTTP client and CLI.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Command-line arguments                                         │
    │      └── python -m goat --timeout 5 http://example.org/            │
    │                                                                      │
    │   2. Environment variables                                          │
    │      └── GOAT_TIMEOUT=5 python -m goat http://example.org/         │
    │                                                                      │
    │   3. Defaults in ClientConfig                                       │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_USER_AGENT = "goat/0.1"


@dataclass
class ClientConfig:
    """
    Configuration for HTTPClient.

    =========================================================================
    CONFIGURATION GROUPS
    =========================================================================

    NETWORK SETTINGS
    - timeout, buffer_size

    HTTP SETTINGS
    - max_response_size, user_agent

    LOGGING
    - log_level, log_format

    =========================================================================
    """

    # ─────────────────────────────────────────────────────────────────────
    # NETWORK SETTINGS
    # ─────────────────────────────────────────────────────────────────────

    timeout: Optional[float] = None
    """
    Socket timeout in seconds, applied by SocketTransport.
    None = fully blocking; the client itself never times out.
    """

    buffer_size: int = 8192
    """
    Bytes requested per recv() call while reading the response.
    """

    # ─────────────────────────────────────────────────────────────────────
    # HTTP SETTINGS
    # ─────────────────────────────────────────────────────────────────────

    max_response_size: int = 10 * 1024 * 1024  # 10 MB
    """
    Upper bound on the bytes read before EOF.
    A server that keeps sending past this is a ProtocolError.
    """

    user_agent: str = DEFAULT_USER_AGENT
    """
    Value of the User-Agent request header.
    """

    # ─────────────────────────────────────────────────────────────────────
    # LOGGING
    # ─────────────────────────────────────────────────────────────────────

    log_level: str = "WARNING"
    """
    Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    INFO shows one access-log line per fetch.
    """

    log_format: str = "text"
    """
    Access-log format: 'json' or 'text'.
    """

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        GOAT_TIMEOUT            Socket timeout in seconds (default: none)
        GOAT_BUFFER_SIZE        recv() size in bytes (default: 8192)
        GOAT_MAX_RESPONSE_SIZE  Response size limit (default: 10 MB)
        GOAT_USER_AGENT         User-Agent header (default: goat/0.1)
        GOAT_LOG_LEVEL          Logging level (default: WARNING)
        GOAT_LOG_FORMAT         'text' or 'json' (default: text)

        =====================================================================
        """
        timeout = os.getenv("GOAT_TIMEOUT")
        return cls(
            timeout=float(timeout) if timeout else None,
            buffer_size=int(os.getenv("GOAT_BUFFER_SIZE", "8192")),
            max_response_size=int(os.getenv("GOAT_MAX_RESPONSE_SIZE", str(10 * 1024 * 1024))),
            user_agent=os.getenv("GOAT_USER_AGENT", DEFAULT_USER_AGENT),
            log_level=os.getenv("GOAT_LOG_LEVEL", "WARNING"),
            log_format=os.getenv("GOAT_LOG_FORMAT", "text"),
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Called by HTTPClient on construction so a bad value fails before
        any socket is opened.
        """
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be > 0")

        if self.buffer_size < 1:
            raise ValueError("buffer_size must be >= 1")

        if self.max_response_size < 1:
            raise ValueError("max_response_size must be >= 1")

        if not self.user_agent or "\r" in self.user_agent or "\n" in self.user_agent:
            raise ValueError("user_agent must be a non-empty single line")

        if self.log_format not in ("text", "json"):
            raise ValueError(f"Invalid log_format: {self.log_format}. Must be 'text' or 'json'.")
