"""PostgreSQL implementation of AccountCredential repository."""

from typing import Optional

from sqlalchemy import delete, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.domain.model import AccountCredential
from skillswap.domain.repository import AccountCredentialRepository
from skillswap.domain.value import AccountId
from skillswap.persistence.mappers import row_to_credential
from skillswap.persistence.tables import account_credentials_table

credentials = account_credentials_table


class PostgresAccountCredentialRepository(AccountCredentialRepository):
    """PostgreSQL implementation of AccountCredentialRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_account_id(
        self, account_id: AccountId
    ) -> Optional[AccountCredential]:
        stmt = select(credentials).where(credentials.c.account_id == account_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_credential(dict(row)) if row else None

    async def save(self, credential: AccountCredential) -> AccountCredential:
        stmt = pg_insert(credentials).values(**credential.model_dump())
        stmt = stmt.on_conflict_do_update(
            index_elements=[credentials.c.account_id],
            set_={
                "password_hash": credential.password_hash,
                "updated_at": credential.updated_at,
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return credential

    async def delete(self, account_id: AccountId) -> None:
        await self.session.execute(
            delete(credentials).where(credentials.c.account_id == account_id)
        )
        await self.session.flush()
