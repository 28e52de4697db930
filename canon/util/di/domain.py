"""Domain layer DI providers."""

from dishka import Scope, provide

from canon.config import ResolutionSettings
from canon.domain.repository import LinkedAccountRepository, UserRepository
from canon.domain.service import IdentityService, ReverseResolver
from canon.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_identity_service(self, user_repository: UserRepository) -> IdentityService:
        """Provide identity projection domain service."""
        return IdentityService(user_repository=user_repository)

    @provide
    def get_reverse_resolver(
        self,
        linked_account_repository: LinkedAccountRepository,
        resolution_settings: ResolutionSettings,
    ) -> ReverseResolver:
        """Provide reverse resolution domain service."""
        return ReverseResolver(
            linked_account_repository=linked_account_repository,
            providers=resolution_settings.providers,
        )
