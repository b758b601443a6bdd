"""Threaded comment API for trackers."""

__version__ = "0.1.0"
