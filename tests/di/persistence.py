"""Mock persistence providers for testing."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from skillswap.domain.repository import (
    AccountCredentialRepository,
    AccountRepository,
    AdminRepository,
    NotificationRepository,
    SwapRequestRepository,
)
from skillswap.domain.service import AfterCommit
from skillswap.persistence.repository.inmemory import (
    InMemoryAccountCredentialRepository,
    InMemoryAccountRepository,
    InMemoryAdminRepository,
    InMemoryNotificationRepository,
    InMemorySwapRequestRepository,
)
from skillswap.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across the request scopes
    opened by the HTTP client in E2E tests. Each test builds a fresh
    container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_account_repository(self) -> AccountRepository:
        """Provide in-memory account repository."""
        return InMemoryAccountRepository()

    @provide(scope=Scope.APP)
    def get_credential_repository(self) -> AccountCredentialRepository:
        """Provide in-memory credential repository."""
        return InMemoryAccountCredentialRepository()

    @provide(scope=Scope.APP)
    def get_swap_repository(self) -> SwapRequestRepository:
        """Provide in-memory swap request repository."""
        return InMemorySwapRequestRepository()

    @provide(scope=Scope.APP)
    def get_notification_repository(self) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository()

    @provide(scope=Scope.APP)
    def get_admin_repository(self) -> AdminRepository:
        """Provide in-memory admin repository."""
        return InMemoryAdminRepository()

    @provide(scope=Scope.REQUEST)
    async def get_after_commit(self) -> AsyncIterator[AfterCommit]:
        """Run queued side effects when the request scope closes cleanly.

        In-memory repositories have no transaction, so closing the scope
        stands in for the commit and an escaping exception for the rollback.
        """
        after_commit = AfterCommit()
        try:
            yield after_commit
        except Exception:
            after_commit.discard()
            raise
        after_commit.run()
