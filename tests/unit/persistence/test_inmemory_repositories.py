"""Unit tests for in-memory repositories."""

import pytest

from canon.domain.value import AccountFilter, AuthProvider, UserId
from canon.persistence.repository.inmemory import (
    InMemoryLinkedAccountRepository,
    InMemoryUserRepository,
)
from tests.conftest import make_account, make_user


class TestInMemoryLinkedAccountRepository:
    """Tests for InMemoryLinkedAccountRepository."""

    @pytest.mark.asyncio
    async def test_find_matching_applies_both_sets(self):
        """Should only return accounts matching provider and ID sets."""
        repo = InMemoryLinkedAccountRepository()
        await repo.save(make_account("u1", AuthProvider.DISCORD, "d-1"))
        await repo.save(make_account("u2", AuthProvider.GOOGLE, "g-1"))
        await repo.save(make_account("u3", AuthProvider.DISCORD, "d-2"))

        found = await repo.find_matching(
            AccountFilter(
                providers=frozenset({AuthProvider.DISCORD}),
                provider_account_ids=frozenset({"d-1", "g-1"}),
            )
        )

        assert [a.user_id for a in found] == ["u1"]

    @pytest.mark.asyncio
    async def test_save_updates_existing_account(self):
        """Saving an account with a known ID replaces it."""
        repo = InMemoryLinkedAccountRepository()
        account = make_account("u1", AuthProvider.DISCORD, "d-1")
        await repo.save(account)
        await repo.save(account.model_copy(update={"user_id": UserId("u2")}))

        assert [a.user_id for a in repo.find_all_by_user_id(UserId("u2"))] == ["u2"]
        assert repo.find_all_by_user_id(UserId("u1")) == []


class TestInMemoryUserRepository:
    """Tests for InMemoryUserRepository."""

    @pytest.mark.asyncio
    async def test_save_stores_carried_accounts(self):
        """Accounts on a saved user become visible to account lookups."""
        accounts = InMemoryLinkedAccountRepository()
        users = InMemoryUserRepository(accounts)
        await users.save(
            make_user(
                "u1", accounts=(make_account("u1", AuthProvider.GOOGLE, "g-1"),)
            )
        )

        found = await accounts.find_matching(
            AccountFilter(
                providers=frozenset(AuthProvider),
                provider_account_ids=frozenset({"g-1"}),
            )
        )
        user = await users.find_by_id(UserId("u1"))

        assert [a.user_id for a in found] == ["u1"]
        assert user is not None
        assert [a.provider_account_id for a in user.linked_accounts] == ["g-1"]

    @pytest.mark.asyncio
    async def test_find_missing_user(self):
        """Unknown users are not found."""
        users = InMemoryUserRepository(InMemoryLinkedAccountRepository())

        assert await users.find_by_id(UserId("nobody")) is None
