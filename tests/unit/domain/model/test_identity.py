"""Unit tests for identity value objects and models."""

import pytest
from pydantic import ValidationError

from canon.domain.model import (
    BatchResolution,
    IdentityEntry,
    Resolved,
    Unresolved,
    UnresolvedEntryDiagnostic,
    UnresolvedReason,
)
from canon.domain.value import AuthMethod, AuthProvider, UserId
from tests.conftest import make_account, make_user


class TestAuthMethod:
    """Tests for AuthMethod / AuthProvider mapping."""

    def test_local_has_no_provider(self):
        """Local auth method should not map to a provider."""
        assert AuthMethod.LOCAL.provider is None

    @pytest.mark.parametrize("provider", list(AuthProvider))
    def test_every_provider_has_an_auth_method(self, provider):
        """Each provider should round-trip through its auth method."""
        method = AuthMethod.from_provider(provider)

        assert method.value == provider.value
        assert method.provider is provider

    @pytest.mark.parametrize(
        "method", [m for m in AuthMethod if m is not AuthMethod.LOCAL]
    )
    def test_every_external_auth_method_has_a_provider(self, method):
        """Each non-local auth method should map back to a provider."""
        provider = method.provider

        assert provider is not None
        assert AuthMethod.from_provider(provider) is method


class TestIdentityEntry:
    """Tests for IdentityEntry."""

    def test_parses_auth_method_from_string(self):
        """Should accept the wire value of an auth method."""
        entry = IdentityEntry(external_id="acc42", auth_method="discord")

        assert entry.auth_method is AuthMethod.DISCORD
        assert not entry.is_local
        assert entry.has_required_fields

    def test_missing_fields(self):
        """Entries without external ID or auth method are incomplete."""
        assert not IdentityEntry(auth_method=AuthMethod.LOCAL).has_required_fields
        assert not IdentityEntry(external_id="u1").has_required_fields
        assert not IdentityEntry(external_id="", auth_method="google").has_required_fields

    def test_rejects_unknown_auth_method(self):
        """Unknown auth methods are not part of the closed set."""
        with pytest.raises(ValidationError):
            IdentityEntry(external_id="x", auth_method="github")


class TestUser:
    """Tests for User."""

    def test_primary_account_is_first_linked(self):
        """The first linked account should be the primary one."""
        first = make_account("u1", AuthProvider.DISCORD, "d-1")
        second = make_account("u1", AuthProvider.GOOGLE, "g-1")
        user = make_user("u1", accounts=(first, second))

        assert user.primary_account == first

    def test_local_user_has_no_primary_account(self):
        """Users without linked accounts have no primary account."""
        assert make_user("u1").primary_account is None

    def test_user_is_immutable(self):
        """Domain models are frozen."""
        user = make_user("u1")

        with pytest.raises(ValidationError):
            user.id = UserId("u2")


class TestBatchResolution:
    """Tests for BatchResolution."""

    def test_results_mix_user_ids_and_placeholders(self):
        """Results should hold user IDs and placeholders by position."""
        batch = BatchResolution(
            resolutions=(
                Resolved(user_id=UserId("u1")),
                Unresolved(
                    placeholder="acc42", reason=UnresolvedReason.UNRESOLVED_MAPPING
                ),
            ),
            diagnostics=(
                UnresolvedEntryDiagnostic(
                    index=1, reason=UnresolvedReason.UNRESOLVED_MAPPING
                ),
            ),
        )

        assert batch.results == ["u1", "acc42"]
        assert not batch.is_complete

    def test_resolutions_validate_from_tagged_dicts(self):
        """Resolutions should be parsed by their kind tag."""
        batch = BatchResolution.model_validate(
            {
                "resolutions": [
                    {"kind": "resolved", "user_id": "u1"},
                    {
                        "kind": "unresolved",
                        "placeholder": "acc42",
                        "reason": "unresolved_mapping",
                    },
                ]
            }
        )

        assert isinstance(batch.resolutions[0], Resolved)
        assert isinstance(batch.resolutions[1], Unresolved)
        assert batch.is_complete

    def test_empty_batch(self):
        """An empty batch has no results and is complete."""
        batch = BatchResolution()

        assert batch.results == []
        assert batch.is_complete
