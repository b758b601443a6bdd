"""User account records as kept by the user store."""

from typing import Optional, Union

from discuss.domain.model.common import DomainModel
from discuss.domain.value import BadgeId, FileId, UserId


class UserAccount(DomainModel):
    """Stored user account.

    ``points`` is kept as the store returns it; it may be missing or
    non-numeric on accounts that never earned points.
    """

    uid: UserId
    name: Optional[str] = None
    profile_image_id: Optional[FileId] = None
    points: Optional[Union[int, str]] = None
    badge_ids: list[BadgeId] = []
