"""Strongly typed identifiers for stored records.

Ids are integers assigned by the store; comment ids increase monotonically
in creation order.
"""

from typing import NewType

CommentId = NewType("CommentId", int)
TrackerId = NewType("TrackerId", int)
UserId = NewType("UserId", int)
FileId = NewType("FileId", int)
BadgeId = NewType("BadgeId", int)
