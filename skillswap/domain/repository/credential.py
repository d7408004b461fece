"""Account credential repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from skillswap.domain.model import AccountCredential
from skillswap.domain.value import AccountId


class AccountCredentialRepository(ABC):
    """Repository for account password credentials."""

    @abstractmethod
    async def find_by_account_id(
        self, account_id: AccountId
    ) -> Optional[AccountCredential]:
        """Find the credential belonging to an account."""
        pass

    @abstractmethod
    async def save(self, credential: AccountCredential) -> AccountCredential:
        """Save a credential (create or update)."""
        pass

    @abstractmethod
    async def delete(self, account_id: AccountId) -> None:
        """Delete the credential of an account, if any."""
        pass
