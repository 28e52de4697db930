"""Mock persistence providers for testing."""

from dishka import Scope, provide

from canon.domain.repository import LinkedAccountRepository, UserRepository
from canon.persistence.repository.inmemory import (
    InMemoryLinkedAccountRepository,
    InMemoryUserRepository,
)
from canon.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The stores are APP-scoped so tests can seed them through the container;
    each test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_account_store(self) -> InMemoryLinkedAccountRepository:
        """Provide shared in-memory account store."""
        return InMemoryLinkedAccountRepository()

    @provide(scope=Scope.APP)
    def get_user_store(
        self, accounts: InMemoryLinkedAccountRepository
    ) -> InMemoryUserRepository:
        """Provide shared in-memory user store."""
        return InMemoryUserRepository(accounts)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, users: InMemoryUserRepository) -> UserRepository:
        """Provide in-memory user repository."""
        return users

    @provide(scope=Scope.REQUEST)
    def get_linked_account_repository(
        self, accounts: InMemoryLinkedAccountRepository
    ) -> LinkedAccountRepository:
        """Provide in-memory linked account repository."""
        return accounts
