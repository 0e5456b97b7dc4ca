"""
Groupie Tracker Booth Log

The "booth" tracks what the site does as it happens, one line per event,
alongside the regular module loggers.

Events:
- 📡 FETCH: Outbound API requests and their outcome
- 🔗 MERGE: Artist/relation join results
- 🚫 DENIED: Requests to restricted paths
- ❓ 404 / ❌ 500: Error pages served
"""

import logging
import sys
from datetime import datetime
from enum import Enum
from pathlib import Path


class Event(Enum):
    """Event types for the booth log."""
    # Fetch events
    FETCH_REQUEST = "📡 FETCH"
    FETCH_DONE = "📡 FETCHED"
    FETCH_ERROR = "📡 FETCH.ERR"

    # Catalog events
    MERGE = "🔗 MERGE"

    # Request events
    ACCESS_DENIED = "🚫 DENIED"
    NOT_FOUND = "❓ 404"
    SERVER_ERROR = "❌ 500"

    # System events
    SYSTEM_START = "⚡ START"
    SYSTEM_STOP = "⚡ STOP"


class BoothFormatter(logging.Formatter):
    """Renders `HH:MM:SS <event> │ message`; records without an event show their level."""

    def format(self, record: logging.LogRecord) -> str:
        event = getattr(record, "event", None)
        label = event.value if isinstance(event, Event) else f"[{record.levelname}]"
        clock = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        return f"{clock} {label} │ {record.getMessage()}"


class BoothLog:
    """
    What the site is doing, one line per fetch, merge and error page.

    Writes to stdout and/or a file and stays out of the root logger, so
    module loggers and the booth never print the same line twice.
    """

    def __init__(self, name: str = "groupie.booth"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.INFO)
        self._configured = False

    def configure(self, log_file: Path | None = None, console: bool = True) -> None:
        """Attach outputs. Only the first call has an effect."""
        if self._configured:
            return

        handlers: list[logging.Handler] = []
        if console:
            handlers.append(logging.StreamHandler(sys.stdout))
        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file))

        formatter = BoothFormatter()
        for handler in handlers:
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

        self.logger.propagate = False
        self._configured = True

    def _log(self, event: Event, message: str) -> None:
        if not self._configured:
            self.configure()
        self.logger.info(message, extra={"event": event})

    # === Fetch events ===

    def fetch_request(self, url: str) -> None:
        """Log an outbound API request."""
        self._log(Event.FETCH_REQUEST, url)

    def fetch_done(self, url: str, count: int) -> None:
        """Log a decoded API response."""
        self._log(Event.FETCH_DONE, f"{url} ({count} records)")

    def fetch_error(self, error: str) -> None:
        """Log a failed API request."""
        self._log(Event.FETCH_ERROR, error)

    # === Catalog events ===

    def merged(self, artists: int, matched: int) -> None:
        """Log the artist/relation join."""
        self._log(Event.MERGE, f"{matched}/{artists} artists matched to tour dates")

    # === Request events ===

    def access_denied(self, path: str) -> None:
        """Log a request to a restricted path."""
        self._log(Event.ACCESS_DENIED, path)

    def not_found(self, path: str) -> None:
        """Log a 404 page being served."""
        self._log(Event.NOT_FOUND, path)

    def server_error(self, path: str, error: str) -> None:
        """Log a 500 page being served."""
        self._log(Event.SERVER_ERROR, f"{path}: {error}")

    # === System events ===

    def start(self, site_name: str = "Groupie Tracker") -> None:
        """Log system start."""
        self._log(Event.SYSTEM_START, f"{site_name} starting...")

    def stop(self, site_name: str = "Groupie Tracker") -> None:
        """Log system stop."""
        self._log(Event.SYSTEM_STOP, f"{site_name} stopped")


# Global booth instance
booth = BoothLog()
