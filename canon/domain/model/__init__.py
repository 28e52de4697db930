"""Domain model entities for canonical identities."""

from canon.domain.model.identity import (
    BatchResolution,
    CanonicalIdentity,
    IdentityEntry,
    Resolution,
    Resolved,
    Unresolved,
    UnresolvedEntryDiagnostic,
    UnresolvedReason,
)
from canon.domain.model.linked_account import LinkedAccount
from canon.domain.model.user import User

__all__ = [
    "User",
    "LinkedAccount",
    "CanonicalIdentity",
    "IdentityEntry",
    "Resolution",
    "Resolved",
    "Unresolved",
    "UnresolvedReason",
    "UnresolvedEntryDiagnostic",
    "BatchResolution",
]
