"""Tracker use cases."""

from .create_tracker import (
    CreateTrackerRequest,
    CreateTrackerResponse,
    CreateTrackerUseCase,
)

__all__ = [
    "CreateTrackerRequest",
    "CreateTrackerResponse",
    "CreateTrackerUseCase",
]
