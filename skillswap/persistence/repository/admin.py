"""PostgreSQL implementation of Admin repository."""

from typing import Optional

from sqlalchemy import delete, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from skillswap.domain.model import Admin
from skillswap.domain.repository import AdminRepository
from skillswap.domain.value import AdminId, EmailAddress
from skillswap.persistence.mappers import admin_to_dict, row_to_admin
from skillswap.persistence.tables import admins_table


class PostgresAdminRepository(AdminRepository):
    """PostgreSQL implementation of AdminRepository."""

    def __init__(
        self,
        session: AsyncSession,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        """Initialize repository.

        Args:
            session: Request-scoped session
            session_factory: Factory for writes that commit on their own
        """
        self.session = session
        self.session_factory = session_factory

    async def find_by_id(self, admin_id: AdminId) -> Optional[Admin]:
        stmt = select(admins_table).where(admins_table.c.id == admin_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_admin(dict(row)) if row else None

    async def find_by_email(self, email: EmailAddress) -> Optional[Admin]:
        stmt = select(admins_table).where(admins_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_admin(dict(row)) if row else None

    async def list_all(self) -> list[Admin]:
        stmt = select(admins_table).order_by(admins_table.c.created_at.desc())
        result = await self.session.execute(stmt)
        return [row_to_admin(dict(row)) for row in result.mappings().all()]

    async def save(self, admin: Admin) -> Admin:
        admin_dict = admin_to_dict(admin)
        stmt = pg_insert(admins_table).values(**admin_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[admins_table.c.id],
            set_={k: v for k, v in admin_dict.items() if k != "id"},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return admin

    async def record_login_failure(self, admin: Admin) -> Admin:
        """Write the attempt counter and lock in a separate committed session."""
        stmt = (
            update(admins_table)
            .where(admins_table.c.id == admin.id)
            .values(
                login_attempts=admin.login_attempts,
                lock_until=admin.lock_until,
                updated_at=admin.updated_at,
            )
        )
        async with self.session_factory() as session:
            async with session.begin():
                await session.execute(stmt)
        return admin

    async def delete(self, admin_id: AdminId) -> bool:
        stmt = (
            delete(admins_table)
            .where(admins_table.c.id == admin_id)
            .returning(admins_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.first() is not None
