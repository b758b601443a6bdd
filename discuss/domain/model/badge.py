"""Badge catalog entries."""

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import BadgeId


class Badge(DomainModel):
    """A badge a user can hold."""

    id: BadgeId
    name: str
    min_points: int = Field(default=0, ge=0)
