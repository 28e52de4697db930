"""Application layer DI providers."""

from dishka import Scope, provide

from canon.application.usecase.identity import (
    GetCanonicalIdentityUseCase,
    ResolveIdentitiesUseCase,
    ResolveIdentityUseCase,
)
from canon.domain.service import IdentityService, ReverseResolver
from canon.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_get_canonical_identity_use_case(
        self, identity_service: IdentityService
    ) -> GetCanonicalIdentityUseCase:
        """Provide get canonical identity use case."""
        return GetCanonicalIdentityUseCase(identity_service=identity_service)

    @provide(scope=Scope.REQUEST)
    def get_resolve_identities_use_case(
        self, reverse_resolver: ReverseResolver
    ) -> ResolveIdentitiesUseCase:
        """Provide batch resolve identities use case."""
        return ResolveIdentitiesUseCase(reverse_resolver=reverse_resolver)

    @provide(scope=Scope.REQUEST)
    def get_resolve_identity_use_case(
        self, reverse_resolver: ReverseResolver
    ) -> ResolveIdentityUseCase:
        """Provide single resolve identity use case."""
        return ResolveIdentityUseCase(reverse_resolver=reverse_resolver)
