"""In-memory admin repository for testing."""

from typing import Optional

from skillswap.domain.model import Admin
from skillswap.domain.repository import AdminRepository
from skillswap.domain.value import AdminId, EmailAddress


class InMemoryAdminRepository(AdminRepository):
    """In-memory implementation of AdminRepository for testing."""

    def __init__(self) -> None:
        self._admins: dict[AdminId, Admin] = {}

    async def find_by_id(self, admin_id: AdminId) -> Optional[Admin]:
        return self._admins.get(admin_id)

    async def find_by_email(self, email: EmailAddress) -> Optional[Admin]:
        for admin in self._admins.values():
            if admin.email == email:
                return admin
        return None

    async def list_all(self) -> list[Admin]:
        return sorted(self._admins.values(), key=lambda a: a.created_at, reverse=True)

    async def save(self, admin: Admin) -> Admin:
        self._admins[admin.id] = admin
        return admin

    async def record_login_failure(self, admin: Admin) -> Admin:
        return await self.save(admin)

    async def delete(self, admin_id: AdminId) -> bool:
        return self._admins.pop(admin_id, None) is not None
