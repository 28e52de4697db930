"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from canon.domain.model.user import User
from canon.domain.value import UserId


class UserRepository(ABC):
    """Read-only lookup of users and their linked accounts.

    The account store owns the data; implementations live in the
    persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by internal ID, with linked accounts.

        Args:
            user_id: The user's internal identifier

        Returns:
            The user with ``linked_accounts`` in creation order if found,
            None otherwise
        """
        pass
