"""Core pieces of a LAN messenger: history, file transfer lists and chat helpers."""

__version__ = "0.1.0"