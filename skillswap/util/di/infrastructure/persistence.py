"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from skillswap.config import Settings
from skillswap.domain.repository import (
    AccountCredentialRepository,
    AccountRepository,
    AdminRepository,
    NotificationRepository,
    SwapRequestRepository,
)
from skillswap.domain.service import AfterCommit
from skillswap.persistence.database import create_engine, create_session_factory
from skillswap.persistence.repository import (
    PostgresAccountCredentialRepository,
    PostgresAccountRepository,
    PostgresAdminRepository,
    PostgresNotificationRepository,
    PostgresSwapRequestRepository,
)
from skillswap.util.di.base import ProviderBase
from skillswap.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the app container closes."""
        engine = create_engine(settings)
        if settings.environment != "test":
            instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    def get_after_commit(self) -> AfterCommit:
        return AfterCommit()

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        after_commit: AfterCommit,
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session commits when the request scope closes normally and rolls
        back if an exception propagates out of it. Side effects queued on
        ``after_commit`` run only after a successful commit.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                after_commit.discard()
                await session.rollback()
                raise
        after_commit.run()

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, session: AsyncSession) -> AccountRepository:
        return PostgresAccountRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_credential_repository(
        self, session: AsyncSession
    ) -> AccountCredentialRepository:
        return PostgresAccountCredentialRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_swap_repository(self, session: AsyncSession) -> SwapRequestRepository:
        return PostgresSwapRequestRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession
    ) -> NotificationRepository:
        return PostgresNotificationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_admin_repository(
        self,
        session: AsyncSession,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> AdminRepository:
        return PostgresAdminRepository(session, session_factory)
