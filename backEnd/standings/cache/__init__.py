"""In-memory snapshot cache."""

from .store import CacheStore, DataSet

__all__ = ["CacheStore", "DataSet"]
