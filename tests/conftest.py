"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from itertools import count

import logfire

from canon.domain.model import LinkedAccount, User
from canon.domain.value import AuthProvider, DisplayName, LinkedAccountId, UserId

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

_ids = count(1)
_EPOCH = datetime(2024, 1, 1, 12, 0, 0)


def make_account(
    user_id: str,
    provider: AuthProvider,
    provider_account_id: str,
    created_at: datetime | None = None,
) -> LinkedAccount:
    """Helper to build a linked account.

    Accounts get increasing creation times unless one is given, so the
    order of calls is the creation order.
    """
    n = next(_ids)
    return LinkedAccount(
        id=LinkedAccountId(f"acct-{n}"),
        user_id=UserId(user_id),
        provider=provider,
        provider_account_id=provider_account_id,
        created_at=created_at or _EPOCH + timedelta(minutes=n),
    )


def make_user(
    user_id: str, name: str = "Test User", accounts: tuple[LinkedAccount, ...] = ()
) -> User:
    """Helper to build a user with optional linked accounts."""
    return User(
        id=UserId(user_id),
        display_name=DisplayName(name),
        linked_accounts=accounts,
    )
