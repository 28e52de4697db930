"""User repository implementation using PostgreSQL."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from canon.adapter.error import LookupServiceError
from canon.domain.model.user import User
from canon.domain.repository.user import UserRepository
from canon.domain.value import UserId
from canon.persistence.mappers import row_to_user
from canon.persistence.tables import accounts_table, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Get user by ID with linked accounts.

        Accounts are ordered by creation time, then ID, so the signup
        account always comes first.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise

        Raises:
            LookupServiceError: If the database query fails
        """
        user_stmt = select(users_table).where(users_table.c.id == user_id)
        accounts_stmt = (
            select(accounts_table)
            .where(accounts_table.c.user_id == user_id)
            .order_by(accounts_table.c.created_at, accounts_table.c.id)
        )

        try:
            result = await self.session.execute(user_stmt)
            row = result.mappings().first()
            if not row:
                return None

            result = await self.session.execute(accounts_stmt)
            account_rows = result.mappings().all()
        except SQLAlchemyError as e:
            raise LookupServiceError(f"User lookup failed: {e}") from e

        return row_to_user(dict(row), [dict(r) for r in account_rows])
