"""In-memory user repository for testing."""

from collections.abc import Iterable

from discuss.domain.model.user import UserAccount
from discuss.domain.repository.user import UserRepository
from discuss.domain.value import UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, UserAccount] = {}
        self.load_calls = 0

    async def load_many(self, user_ids: Iterable[UserId]) -> dict[UserId, UserAccount]:
        """Load accounts, counting each call as one round trip."""
        self.load_calls += 1
        return {uid: self._users[uid] for uid in user_ids if uid in self._users}

    async def save(self, account: UserAccount) -> UserAccount:
        """Save or update an account."""
        self._users[account.uid] = account
        return account
