"""PostgreSQL repository implementations."""

from skillswap.persistence.repository.account import PostgresAccountRepository
from skillswap.persistence.repository.admin import PostgresAdminRepository
from skillswap.persistence.repository.credential import (
    PostgresAccountCredentialRepository,
)
from skillswap.persistence.repository.notification import (
    PostgresNotificationRepository,
)
from skillswap.persistence.repository.swap import PostgresSwapRequestRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresAccountCredentialRepository",
    "PostgresAdminRepository",
    "PostgresNotificationRepository",
    "PostgresSwapRequestRepository",
]
