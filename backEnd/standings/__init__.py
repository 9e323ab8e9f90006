"""
Tournament standings mirror.

Keeps an in-memory copy of the published tournament sheets (players,
leaderboards, lobby assignments), ranks leaderboards with the tie-break
cascade, and serves read-only views over HTTP.
"""

__version__ = "0.1.0"
