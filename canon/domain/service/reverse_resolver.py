"""Batch reverse resolution of canonical identities.

Maps canonical identity descriptors back to internal user IDs. For local
descriptors the external ID already is the internal ID. Every other
descriptor is resolved through a single batched linked-account lookup,
whose results come back unordered and are re-paired here.
"""

from collections.abc import Iterable, Sequence
from typing import Optional

import logfire

from canon.domain.error import NotFoundError
from canon.domain.model import (
    BatchResolution,
    IdentityEntry,
    LinkedAccount,
    Resolution,
    Resolved,
    Unresolved,
    UnresolvedEntryDiagnostic,
    UnresolvedReason,
)
from canon.domain.repository import LinkedAccountRepository
from canon.domain.value import AccountFilter, AuthProvider, UserId

KNOWN_PROVIDERS: frozenset[AuthProvider] = frozenset(AuthProvider)


def diagnose(
    entries: Sequence[IdentityEntry], index: int
) -> Optional[UnresolvedEntryDiagnostic]:
    """Describe why a batch position is unresolved before any lookup.

    A well-formed non-local entry is reported as an unresolved mapping; it
    stays that way unless the batched lookup finds its account.

    Args:
        entries: The batch being resolved
        index: Position of the entry

    Returns:
        Diagnostic tagged with the reason and whatever entry fields exist,
        or None for a local entry, which always resolves to its own ID
    """
    if not entries:
        return UnresolvedEntryDiagnostic(
            index=index, reason=UnresolvedReason.EMPTY_BATCH
        )
    if index < 0 or index >= len(entries):
        return UnresolvedEntryDiagnostic(
            index=index, reason=UnresolvedReason.INDEX_OUT_OF_BOUNDS
        )

    entry = entries[index]
    if not entry.has_required_fields:
        reason = UnresolvedReason.MISSING_FIELDS
    elif entry.is_local:
        return None
    else:
        reason = UnresolvedReason.UNRESOLVED_MAPPING
    return UnresolvedEntryDiagnostic(
        index=index,
        reason=reason,
        auth_method=entry.auth_method,
        external_id=entry.external_id,
    )


def _index_accounts(
    accounts: Iterable[LinkedAccount],
) -> dict[tuple[AuthProvider, str], LinkedAccount]:
    # First account per key in lookup order wins
    indexed: dict[tuple[AuthProvider, str], LinkedAccount] = {}
    for account in accounts:
        indexed.setdefault(account.key, account)
    return indexed


class ReverseResolver:
    """Domain service resolving canonical identities to internal user IDs.

    Stateless apart from its repository, so concurrent calls are safe.
    Lookup failures propagate unchanged and are never retried here.
    """

    def __init__(
        self,
        linked_account_repository: LinkedAccountRepository,
        providers: Optional[Iterable[AuthProvider]] = None,
    ) -> None:
        """Initialize reverse resolver.

        Args:
            linked_account_repository: Linked account repository
            providers: Providers included in batched lookups (all by default)
        """
        self.linked_account_repository = linked_account_repository
        self.providers = (
            frozenset(providers) if providers is not None else KNOWN_PROVIDERS
        )

    async def resolve_batch(self, entries: Sequence[IdentityEntry]) -> BatchResolution:
        """Resolve a batch of identity entries to internal user IDs.

        Steps:
        1. Resolve local entries to their own external ID
        2. Set aside entries missing an auth method or external ID
        3. Look up all remaining entries with one batched query
        4. Re-pair lookup results with entries by provider and account ID

        Args:
            entries: Identity entries in caller order

        Returns:
            Resolutions aligned with ``entries`` plus a diagnostic for each
            position that could not be resolved
        """
        with logfire.span("reverse_resolver.resolve_batch", size=len(entries)):
            resolutions: list[Resolution] = []
            unresolved: dict[int, UnresolvedEntryDiagnostic] = {}
            pending: list[int] = []

            for index, entry in enumerate(entries):
                diagnostic = diagnose(entries, index)
                if diagnostic is None:
                    resolutions.append(Resolved(user_id=UserId(entry.external_id)))
                    continue

                resolutions.append(
                    Unresolved(placeholder=entry.external_id, reason=diagnostic.reason)
                )
                unresolved[index] = diagnostic
                if diagnostic.reason is UnresolvedReason.UNRESOLVED_MAPPING:
                    pending.append(index)

            if pending:
                accounts = await self.linked_account_repository.find_matching(
                    AccountFilter(
                        providers=self.providers,
                        provider_account_ids=frozenset(
                            entries[i].external_id for i in pending
                        ),
                    )
                )
                by_key = _index_accounts(accounts)
                for index in pending:
                    entry = entries[index]
                    account = by_key.get((entry.auth_method.provider, entry.external_id))
                    if account is not None:
                        resolutions[index] = Resolved(user_id=account.user_id)
                        del unresolved[index]
            else:
                logfire.debug("No external entries, lookup skipped", size=len(entries))

            diagnostics = list(unresolved.values())
            for diagnostic in diagnostics:
                logfire.warn(
                    "Identity entry unresolved",
                    index=diagnostic.index,
                    reason=diagnostic.reason.value,
                    auth_method=(
                        diagnostic.auth_method.value
                        if diagnostic.auth_method
                        else None
                    ),
                    external_id=diagnostic.external_id,
                )

            logfire.info(
                "Identity batch resolved",
                size=len(entries),
                looked_up=len(pending),
                unresolved=len(diagnostics),
            )
            return BatchResolution(
                resolutions=tuple(resolutions), diagnostics=tuple(diagnostics)
            )

    async def resolve_one(self, external_id: str, provider: AuthProvider) -> UserId:
        """Resolve one provider account to its owning user's internal ID.

        Args:
            external_id: Account ID issued by the provider
            provider: Authentication provider

        Returns:
            Internal ID of the owning user

        Raises:
            NotFoundError: If no account is linked for this provider ID
        """
        with logfire.span(
            "reverse_resolver.resolve_one",
            provider=provider.value,
            external_id=external_id,
        ):
            accounts = await self.linked_account_repository.find_matching(
                AccountFilter(
                    providers=frozenset({provider}),
                    provider_account_ids=frozenset({external_id}),
                )
            )
            account = _index_accounts(accounts).get((provider, external_id))
            if account is None:
                logfire.warn(
                    "Linked account not found",
                    provider=provider.value,
                    external_id=external_id,
                )
                raise NotFoundError("LinkedAccount", f"{provider.value}:{external_id}")

            logfire.info(
                "Linked account resolved",
                provider=provider.value,
                external_id=external_id,
                user_id=str(account.user_id),
            )
            return account.user_id
