"""Exceptions raised by the refresh pipelines."""

from typing import Optional


class StandingsError(Exception):
    """Base exception for standings failures."""


class FetchFailure(StandingsError):
    """Raised when a sheet cannot be downloaded."""

    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class HeaderNotFound(StandingsError):
    """Raised when no header row contains the key column."""

    def __init__(self, key: str):
        super().__init__(f"No header row containing '{key}' found")
        self.key = key


class MalformedGrid(StandingsError):
    """Raised when sheet text cannot be read as a grid at all."""
