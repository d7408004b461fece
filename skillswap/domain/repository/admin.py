"""Admin repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from skillswap.domain.model import Admin
from skillswap.domain.value import AdminId, EmailAddress


class AdminRepository(ABC):
    """Repository for Admin principals."""

    @abstractmethod
    async def find_by_id(self, admin_id: AdminId) -> Optional[Admin]:
        """Find an admin by ID."""
        pass

    @abstractmethod
    async def find_by_email(self, email: EmailAddress) -> Optional[Admin]:
        """Find an admin by email."""
        pass

    @abstractmethod
    async def list_all(self) -> list[Admin]:
        """All admins, newest first."""
        pass

    @abstractmethod
    async def save(self, admin: Admin) -> Admin:
        """Save an admin (create or update)."""
        pass

    @abstractmethod
    async def record_login_failure(self, admin: Admin) -> Admin:
        """Persist the lockout state after a failed login.

        The write must survive the rollback of the request that raises the
        authentication error.
        """
        pass

    @abstractmethod
    async def delete(self, admin_id: AdminId) -> bool:
        """Delete an admin.

        Returns:
            True if an admin was deleted
        """
        pass
