"""Configuration module for the standings service."""

from .settings import LobbyLayout, Settings, get_settings

__all__ = [
    "LobbyLayout",
    "Settings",
    "get_settings",
]
