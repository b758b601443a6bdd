"""User account repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Iterable

from discuss.domain.model.user import UserAccount
from discuss.domain.value import UserId


class UserRepository(ABC):
    """Repository for user accounts."""

    @abstractmethod
    async def load_many(self, user_ids: Iterable[UserId]) -> dict[UserId, UserAccount]:
        """Load user accounts in one round trip.

        Args:
            user_ids: Ids to load; unknown ids are skipped

        Returns:
            Mapping of id to account
        """
        pass
