"""
Exceptions — Error kinds raised by the feed pipeline.

Every failure is fatal: errors are raised where they are detected and caught
once, by FeedOrchestrator.run(), which reports them and marks the run failed.
"""

from typing import List, Optional


class FeedError(Exception):
    """Base class for all feed generation failures."""


class ConfigurationError(FeedError):
    def __init__(self, missing: List[str]):
        self.missing = missing
        super().__init__(
            f"Missing required environment variables: {' and '.join(missing)}"
        )


class TransportError(FeedError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ProtocolError(FeedError):
    def __init__(self, message: str, errors: Optional[List[str]] = None):
        self.errors = errors or []
        super().__init__(message)


class FilesystemError(FeedError):
    pass
