"""Repository interfaces for the SkillSwap domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from skillswap.domain.repository.account import (
    AccountListing,
    AccountRepository,
    AccountSearch,
    SkillSide,
)
from skillswap.domain.repository.admin import AdminRepository
from skillswap.domain.repository.credential import AccountCredentialRepository
from skillswap.domain.repository.notification import NotificationRepository
from skillswap.domain.repository.swap import SwapRequestRepository

__all__ = [
    "AccountCredentialRepository",
    "AccountListing",
    "AccountRepository",
    "AccountSearch",
    "AdminRepository",
    "NotificationRepository",
    "SkillSide",
    "SwapRequestRepository",
]
