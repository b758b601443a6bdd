"""Tracker records.

A tracker anchors a comment thread to a source identifier. Comments refer
to their tracker through ``Comment.entity_id``.
"""

from typing import Optional

from discuss.domain.model.common import DomainModel
from discuss.domain.value import TrackerId


class TrackerDraft(DomainModel):
    """Fields for a tracker that has not been stored yet."""

    kind: str = "commenttracker"
    source_id: str
    title: Optional[str] = None
    is_locked: bool = False
    status: bool = True


class Tracker(DomainModel):
    """Stored tracker."""

    id: TrackerId
    kind: str = "commenttracker"
    source_id: str
    title: Optional[str] = None
    is_locked: bool = False
    status: bool = True
