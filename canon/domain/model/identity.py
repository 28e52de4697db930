"""Canonical identity descriptors and reverse-resolution results.

A canonical identity is what downstream consumers see for a user: either
the local account itself or the provider account it signed up with.
Reverse resolution maps descriptors back to internal user IDs and keeps
resolved and unresolved positions structurally distinct.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import Field

from canon.domain.model.common import DomainModel
from canon.domain.value import AuthMethod, DisplayName, UserId


class CanonicalIdentity(DomainModel):
    """Canonical identity descriptor presented to downstream consumers.

    For local users ``id`` is the internal user ID; otherwise it is the
    provider account ID of the first linked account.
    """

    id: str
    display_name: DisplayName
    auth_method: AuthMethod


class IdentityEntry(DomainModel):
    """One descriptor to resolve back to an internal user ID.

    Fields are optional so malformed entries can be diagnosed rather than
    rejected with the whole batch.
    """

    external_id: Optional[str] = None
    auth_method: Optional[AuthMethod] = None

    @property
    def is_local(self) -> bool:
        """True for entries authenticated against the local store."""
        return self.auth_method is AuthMethod.LOCAL

    @property
    def has_required_fields(self) -> bool:
        """True when both external ID and auth method are present."""
        return bool(self.external_id) and self.auth_method is not None


class UnresolvedReason(str, Enum):
    """Why a batch position could not be mapped to an internal user ID."""

    EMPTY_BATCH = "empty_batch"
    INDEX_OUT_OF_BOUNDS = "index_out_of_bounds"
    MISSING_FIELDS = "missing_fields"
    UNRESOLVED_MAPPING = "unresolved_mapping"


class UnresolvedEntryDiagnostic(DomainModel):
    """Diagnostic for one batch position that could not be resolved.

    Carries enough of the entry to reconstruct it: the position plus
    whichever of auth method and external ID were present.
    """

    index: int
    reason: UnresolvedReason
    auth_method: Optional[AuthMethod] = None
    external_id: Optional[str] = None


class Resolved(DomainModel):
    """Position mapped to an internal user ID."""

    kind: Literal["resolved"] = "resolved"
    user_id: UserId


class Unresolved(DomainModel):
    """Position that could not be mapped.

    ``placeholder`` is the entry's external ID, kept so the batch stays
    positionally aligned. It is not an internal user ID.
    """

    kind: Literal["unresolved"] = "unresolved"
    placeholder: Optional[str] = None
    reason: UnresolvedReason


Resolution = Annotated[Union[Resolved, Unresolved], Field(discriminator="kind")]


class BatchResolution(DomainModel):
    """Result of resolving a batch of identity entries.

    ``resolutions`` is aligned with the input entries: same length, same
    order.
    """

    resolutions: tuple[Resolution, ...] = Field(default_factory=tuple)
    diagnostics: tuple[UnresolvedEntryDiagnostic, ...] = Field(default_factory=tuple)

    @property
    def results(self) -> list[Optional[str]]:
        """Internal user ID, or the placeholder, for each position."""
        return [
            r.user_id if isinstance(r, Resolved) else r.placeholder
            for r in self.resolutions
        ]

    @property
    def is_complete(self) -> bool:
        """True when every position resolved."""
        return not self.diagnostics
