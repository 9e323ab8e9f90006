"""HTTP API for the standings service."""
