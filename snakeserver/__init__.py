"""Grid engine and HTTP response helpers for a multiplayer snake game server."""

__version__ = "0.1.0"