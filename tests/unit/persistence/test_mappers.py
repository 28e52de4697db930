"""Unit tests for row to domain model mappers."""

from datetime import datetime, timezone

from canon.domain.value import AuthProvider, DisplayName
from canon.persistence.mappers import row_to_linked_account, row_to_user


def _account_row(account_id: str, provider: str, provider_account_id: str) -> dict:
    return {
        "id": account_id,
        "user_id": "clx-1",
        "provider": provider,
        "provider_account_id": provider_account_id,
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }


class TestRowToLinkedAccount:
    """Tests for row_to_linked_account()."""

    def test_maps_all_columns(self):
        """Should map provider strings to AuthProvider."""
        account = row_to_linked_account(_account_row("a1", "discord", "d-1"))

        assert account.id == "a1"
        assert account.user_id == "clx-1"
        assert account.provider is AuthProvider.DISCORD
        assert account.provider_account_id == "d-1"


class TestRowToUser:
    """Tests for row_to_user()."""

    def test_keeps_account_order(self):
        """Accounts should stay in the order the query returned them."""
        user = row_to_user(
            {"id": "clx-1", "name": "Alice"},
            [_account_row("a2", "google", "g-1"), _account_row("a1", "discord", "d-1")],
        )

        assert user.display_name == DisplayName("Alice")
        assert [a.id for a in user.linked_accounts] == ["a2", "a1"]

    def test_user_without_accounts(self):
        """Users without account rows have no linked accounts."""
        user = row_to_user({"id": "clx-1", "name": "Alice"})

        assert user.linked_accounts == ()
