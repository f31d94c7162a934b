"""
=============================================================================
FETCH ACCESS LOG
=============================================================================

One structured log entry per fetch, written to the "goat.access" logger:

    text:  GET http://example.org:80/ 200 1256B 12.31ms [a1b2c3d4]
    json:  {"fetch_id": "a1b2c3d4", "method": "GET", "url": ..., ...}

The namespaced logger can be tuned separately from the rest of goat:

    logging.getLogger("goat.access").setLevel(logging.INFO)

=============================================================================
"""

import json
import logging
from dataclasses import dataclass
from typing import Optional


logger = logging.getLogger("goat.access")


@dataclass
class FetchLog:
    """
    Structured log entry for one fetch.

    Fields:
        fetch_id:       Connection id, to correlate with debug logs
        method:         HTTP method (always GET)
        url:            Rendered URL that was fetched
        status:         Status code string, or None if the fetch failed
        content_length: Body size in bytes
        duration_ms:    Time from connect to parsed response
        error:          Exception class name when the fetch failed
    """

    fetch_id: str
    method: str
    url: str
    status: Optional[str]
    content_length: int
    duration_ms: float
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "fetch_id": self.fetch_id,
            "method": self.method,
            "url": self.url,
            "status": self.status,
            "content_length": self.content_length,
            "duration_ms": round(self.duration_ms, 2),
            "error": self.error,
        }

    def to_text(self) -> str:
        outcome = self.status if self.error is None else f"failed ({self.error})"
        return (
            f"{self.method} {self.url} {outcome} "
            f"{self.content_length}B {self.duration_ms:.2f}ms [{self.fetch_id}]"
        )


def emit(entry: FetchLog, log_format: str = "text") -> None:
    """Write the entry at INFO (WARNING for failed fetches)."""
    level = logging.INFO if entry.error is None else logging.WARNING
    if log_format == "json":
        logger.log(level, json.dumps(entry.to_dict()))
    else:
        logger.log(level, entry.to_text())
