"""PostgreSQL implementation of User repository."""

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import UserAccount
from discuss.domain.repository import UserRepository
from discuss.domain.value import UserId
from discuss.persistence.mappers import row_to_user_account
from discuss.persistence.repository.errors import lookup_errors
from discuss.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def load_many(self, user_ids: Iterable[UserId]) -> dict[UserId, UserAccount]:
        """Load accounts with a single IN query."""
        ids = list(set(user_ids))
        if not ids:
            return {}
        stmt = select(users_table).where(users_table.c.uid.in_(ids))
        with lookup_errors("load users"):
            result = await self.session.execute(stmt)
        accounts = [row_to_user_account(row._asdict()) for row in result.fetchall()]
        return {account.uid: account for account in accounts}
