"""In-memory repository implementations for testing."""

from .account import InMemoryAccountRepository
from .admin import InMemoryAdminRepository
from .credential import InMemoryAccountCredentialRepository
from .notification import InMemoryNotificationRepository
from .swap import InMemorySwapRequestRepository

__all__ = [
    "InMemoryAccountCredentialRepository",
    "InMemoryAccountRepository",
    "InMemoryAdminRepository",
    "InMemoryNotificationRepository",
    "InMemorySwapRequestRepository",
]
