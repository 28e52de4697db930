"""Identity use cases."""

from .get_canonical_identity import GetCanonicalIdentityUseCase
from .resolve_identities import ResolveIdentitiesUseCase
from .resolve_identity import ResolveIdentityUseCase

__all__ = [
    "GetCanonicalIdentityUseCase",
    "ResolveIdentitiesUseCase",
    "ResolveIdentityUseCase",
]
