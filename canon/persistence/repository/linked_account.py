"""LinkedAccount repository implementation using PostgreSQL."""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from canon.adapter.error import LookupServiceError
from canon.domain.model.linked_account import LinkedAccount
from canon.domain.repository.linked_account import LinkedAccountRepository
from canon.domain.value import AccountFilter
from canon.persistence.mappers import row_to_linked_account
from canon.persistence.tables import accounts_table


class PostgresLinkedAccountRepository(LinkedAccountRepository):
    """PostgreSQL implementation of LinkedAccountRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_matching(self, account_filter: AccountFilter) -> list[LinkedAccount]:
        """Find accounts whose provider and provider account ID are in the filter.

        Args:
            account_filter: Providers and provider account IDs to match

        Returns:
            Matching accounts, unordered

        Raises:
            LookupServiceError: If the database query fails
        """
        if account_filter.is_empty:
            return []

        stmt = select(accounts_table).where(
            accounts_table.c.provider.in_(
                [p.value for p in account_filter.providers]
            ),
            accounts_table.c.provider_account_id.in_(
                list(account_filter.provider_account_ids)
            ),
        )
        try:
            result = await self.session.execute(stmt)
            rows = result.mappings().all()
        except SQLAlchemyError as e:
            raise LookupServiceError(f"Linked account lookup failed: {e}") from e

        return [row_to_linked_account(dict(row)) for row in rows]
