"""In-memory account credential repository for testing."""

from typing import Optional

from skillswap.domain.model import AccountCredential
from skillswap.domain.repository import AccountCredentialRepository
from skillswap.domain.value import AccountId


class InMemoryAccountCredentialRepository(AccountCredentialRepository):
    """In-memory implementation of AccountCredentialRepository for testing."""

    def __init__(self) -> None:
        self._credentials: dict[AccountId, AccountCredential] = {}

    async def find_by_account_id(
        self, account_id: AccountId
    ) -> Optional[AccountCredential]:
        return self._credentials.get(account_id)

    async def save(self, credential: AccountCredential) -> AccountCredential:
        self._credentials[credential.account_id] = credential
        return credential

    async def delete(self, account_id: AccountId) -> None:
        self._credentials.pop(account_id, None)
