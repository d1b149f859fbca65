"""Exceptions raised while collecting listings.

    DataSourceError
    ├── NavigationError      page unreachable or timed out; skipped
    ├── ExtractionError      page script threw or returned the wrong shape; skipped
    └── BrowserSessionError  the shared browser is gone; aborts the run
"""


class DataSourceError(Exception):
    """Base exception for listing source errors.

    Attributes:
        source: Name of the source (or component) that raised the error
        message: Error description
    """

    def __init__(self, source: str, message: str):
        self.source = source
        self.message = message
        super().__init__(f"[{source}] {message}")


class NavigationError(DataSourceError):
    """Raised when a page cannot be reached or times out."""


class ExtractionError(DataSourceError):
    """Raised when a page script throws or returns an unexpected shape."""


class BrowserSessionError(DataSourceError):
    """Raised when the shared browser itself is unusable (crash, closed)."""
