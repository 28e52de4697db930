"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from canon.config import Settings
from canon.domain.repository import LinkedAccountRepository, UserRepository
from canon.persistence.database import create_engine, create_session_factory
from canon.persistence.repository import (
    PostgresLinkedAccountRepository,
    PostgresUserRepository,
)
from canon.util.di.base import ProviderBase
from canon.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Lookups are read-only, so the transaction is always rolled back
        when the request ends.
        """
        async with session_factory() as session:
            try:
                yield session
            finally:
                await session.rollback()
                logfire.debug("Session closed")

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_linked_account_repository(
        self, session: AsyncSession
    ) -> LinkedAccountRepository:
        """Provide LinkedAccount repository."""
        return PostgresLinkedAccountRepository(session)
