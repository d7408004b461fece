"""PostgreSQL implementation of Account repository."""

from collections import defaultdict
from datetime import datetime
from typing import Any, Optional

import logfire
from sqlalchemy import (
    Numeric,
    and_,
    case,
    cast,
    delete,
    desc,
    exists,
    func,
    or_,
    select,
)
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from skillswap.domain.model import Account, Feedback
from skillswap.domain.repository import (
    AccountListing,
    AccountRepository,
    AccountSearch,
    SkillSide,
)
from skillswap.domain.value import (
    AccountId,
    AccountStatusFilter,
    EmailAddress,
    FeedbackId,
    PageRequest,
)
from skillswap.persistence.mappers import (
    account_to_dict,
    feedback_to_dict,
    row_to_account,
    row_to_feedback,
)
from skillswap.persistence.tables import accounts_table, feedback_table

# Rounded like Account.average_rating so both sort identically
_average_rating = func.round(
    case(
        (
            accounts_table.c.rating_count > 0,
            cast(accounts_table.c.rating_sum, Numeric)
            / accounts_table.c.rating_count,
        ),
        else_=0,
    ),
    1,
)


def _skills_text(column) -> Any:
    return func.array_to_string(column, " ")


def _has_any_skill(column, skills: list[str]) -> Any:
    """Case-insensitive any-of match against a skills array column."""
    skill = func.unnest(column).table_valued("skill").alias("skill")
    return exists(
        select(1)
        .select_from(skill)
        .where(func.lower(skill.c.skill).in_([s.lower() for s in skills]))
    )


class PostgresAccountRepository(AccountRepository):
    """PostgreSQL implementation of AccountRepository.

    Feedback entries are stored in their own table and hydrated in one
    extra query per batch of accounts.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _fetch_feedback_for_accounts(
        self, account_ids: list[AccountId]
    ) -> dict[AccountId, list[Feedback]]:
        if not account_ids:
            return {}
        stmt = (
            select(feedback_table)
            .where(feedback_table.c.account_id.in_(account_ids))
            .order_by(feedback_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        feedback_map: dict[AccountId, list[Feedback]] = defaultdict(list)
        for row in result.mappings().all():
            feedback_map[row["account_id"]].append(row_to_feedback(dict(row)))
        return feedback_map

    async def _hydrate(self, rows) -> list[Account]:
        account_rows = [dict(row) for row in rows]
        feedback_map = await self._fetch_feedback_for_accounts(
            [row["id"] for row in account_rows]
        )
        return [
            row_to_account(row, feedback_map.get(row["id"], []))
            for row in account_rows
        ]

    async def _find_one(self, stmt) -> Optional[Account]:
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        if row is None:
            return None
        accounts = await self._hydrate([row])
        return accounts[0]

    async def find_by_id(
        self, account_id: AccountId, for_update: bool = False
    ) -> Optional[Account]:
        stmt = select(accounts_table).where(accounts_table.c.id == account_id)
        if for_update:
            stmt = stmt.with_for_update()
        return await self._find_one(stmt)

    async def find_by_email(self, email: EmailAddress) -> Optional[Account]:
        stmt = select(accounts_table).where(accounts_table.c.email == email.root)
        return await self._find_one(stmt)

    async def find_by_feedback_id(
        self, feedback_id: FeedbackId, for_update: bool = False
    ) -> Optional[Account]:
        owner = select(feedback_table.c.account_id).where(
            feedback_table.c.id == feedback_id
        )
        stmt = select(accounts_table).where(
            accounts_table.c.id == owner.scalar_subquery()
        )
        if for_update:
            stmt = stmt.with_for_update()
        return await self._find_one(stmt)

    async def find_rated_by(self, rater_id: AccountId) -> list[Account]:
        rated = select(feedback_table.c.account_id).where(
            feedback_table.c.from_account_id == rater_id
        )
        stmt = (
            select(accounts_table)
            .where(accounts_table.c.id.in_(rated))
            .order_by(accounts_table.c.id)
            .with_for_update()
        )
        result = await self.session.execute(stmt)
        return await self._hydrate(result.mappings().all())

    async def find_many(self, account_ids: list[AccountId]) -> list[Account]:
        if not account_ids:
            return []
        stmt = select(accounts_table).where(accounts_table.c.id.in_(account_ids))
        result = await self.session.execute(stmt)
        return await self._hydrate(result.mappings().all())

    async def save(self, account: Account) -> Account:
        """Upsert the account row and synchronize its feedback rows."""
        with logfire.span("account_repository.save", account_id=str(account.id)):
            account_dict = account_to_dict(account)
            stmt = pg_insert(accounts_table).values(**account_dict)
            stmt = stmt.on_conflict_do_update(
                index_elements=[accounts_table.c.id],
                set_={k: v for k, v in account_dict.items() if k != "id"},
            )
            await self.session.execute(stmt)

            kept_ids = [entry.id for entry in account.feedback]
            stale = delete(feedback_table).where(
                feedback_table.c.account_id == account.id
            )
            if kept_ids:
                stale = stale.where(feedback_table.c.id.notin_(kept_ids))
            await self.session.execute(stale)

            for entry in account.feedback:
                entry_dict = feedback_to_dict(account.id, entry)
                upsert = pg_insert(feedback_table).values(**entry_dict)
                upsert = upsert.on_conflict_do_update(
                    index_elements=[feedback_table.c.id],
                    set_={"stars": entry.stars, "comment": entry.comment},
                )
                await self.session.execute(upsert)

            await self.session.flush()
            return account

    async def delete(self, account_id: AccountId) -> bool:
        stmt = (
            delete(accounts_table)
            .where(accounts_table.c.id == account_id)
            .returning(accounts_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.first() is not None

    def _search_conditions(self, criteria: AccountSearch) -> list[Any]:
        conditions: list[Any] = [
            accounts_table.c.is_public.is_(True),
            accounts_table.c.is_banned.is_(False),
        ]
        if criteria.text:
            pattern = f"%{criteria.text}%"
            conditions.append(
                or_(
                    accounts_table.c.name.ilike(pattern),
                    accounts_table.c.location.ilike(pattern),
                    _skills_text(accounts_table.c.skills_offered).ilike(pattern),
                    _skills_text(accounts_table.c.skills_wanted).ilike(pattern),
                )
            )
        if criteria.skills_offered:
            conditions.append(
                _has_any_skill(accounts_table.c.skills_offered, criteria.skills_offered)
            )
        if criteria.skills_wanted:
            conditions.append(
                _has_any_skill(accounts_table.c.skills_wanted, criteria.skills_wanted)
            )
        if criteria.availability:
            conditions.append(
                accounts_table.c.availability == criteria.availability.value
            )
        if criteria.location:
            conditions.append(accounts_table.c.location.ilike(f"%{criteria.location}%"))
        return conditions

    async def _page(
        self, conditions: list[Any], order_by: list[Any], page: PageRequest
    ) -> tuple[list[Account], int]:
        where = and_(*conditions) if conditions else None

        count_stmt = select(func.count()).select_from(accounts_table)
        stmt = select(accounts_table)
        if where is not None:
            count_stmt = count_stmt.where(where)
            stmt = stmt.where(where)
        stmt = stmt.order_by(*order_by).limit(page.limit).offset(page.offset)

        total = (await self.session.execute(count_stmt)).scalar() or 0
        result = await self.session.execute(stmt)
        return await self._hydrate(result.mappings().all()), total

    async def search(
        self, criteria: AccountSearch, page: PageRequest
    ) -> tuple[list[Account], int]:
        with logfire.span("account_repository.search", page=page.page):
            return await self._page(
                self._search_conditions(criteria),
                [_average_rating.desc(), accounts_table.c.created_at.desc()],
                page,
            )

    async def list_accounts(
        self, listing: AccountListing, page: PageRequest
    ) -> tuple[list[Account], int]:
        conditions: list[Any] = []
        if listing.text:
            pattern = f"%{listing.text}%"
            conditions.append(
                or_(
                    accounts_table.c.name.ilike(pattern),
                    accounts_table.c.email.ilike(pattern),
                    accounts_table.c.location.ilike(pattern),
                )
            )
        if listing.status is AccountStatusFilter.ACTIVE:
            conditions.append(accounts_table.c.is_banned.is_(False))
        elif listing.status is AccountStatusFilter.BANNED:
            conditions.append(accounts_table.c.is_banned.is_(True))
        elif listing.status is AccountStatusFilter.UNVERIFIED:
            conditions.append(accounts_table.c.is_verified.is_(False))

        return await self._page(
            conditions, [accounts_table.c.created_at.desc()], page
        )

    async def find_active_ids(
        self, account_ids: list[AccountId] | None = None
    ) -> list[AccountId]:
        stmt = select(accounts_table.c.id).where(accounts_table.c.is_banned.is_(False))
        if account_ids is not None:
            if not account_ids:
                return []
            stmt = stmt.where(accounts_table.c.id.in_(account_ids))
        result = await self.session.execute(stmt)
        return [AccountId(row.id) for row in result.all()]

    async def count(
        self,
        is_banned: bool | None = None,
        created_since: datetime | None = None,
    ) -> int:
        stmt = select(func.count()).select_from(accounts_table)
        if is_banned is not None:
            stmt = stmt.where(accounts_table.c.is_banned.is_(is_banned))
        if created_since is not None:
            stmt = stmt.where(accounts_table.c.created_at >= created_since)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_recent(self, limit: int = 5) -> list[Account]:
        stmt = (
            select(accounts_table)
            .order_by(accounts_table.c.created_at.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return await self._hydrate(result.mappings().all())

    async def top_skills(self, side: SkillSide, limit: int = 10) -> list[tuple[str, int]]:
        column = (
            accounts_table.c.skills_offered
            if side == "offered"
            else accounts_table.c.skills_wanted
        )
        skills = select(func.unnest(column).label("skill")).subquery()
        stmt = (
            select(skills.c.skill, func.count().label("accounts"))
            .group_by(skills.c.skill)
            .order_by(desc("accounts"), skills.c.skill)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [(row.skill, row.accounts) for row in result.all()]

    async def list_feedback(
        self, page: PageRequest, min_stars: int | None = None
    ) -> tuple[list[tuple[AccountId, Feedback]], int]:
        count_stmt = select(func.count()).select_from(feedback_table)
        stmt = select(feedback_table)
        if min_stars is not None:
            count_stmt = count_stmt.where(feedback_table.c.stars >= min_stars)
            stmt = stmt.where(feedback_table.c.stars >= min_stars)
        stmt = (
            stmt.order_by(feedback_table.c.created_at.desc())
            .limit(page.limit)
            .offset(page.offset)
        )

        total = (await self.session.execute(count_stmt)).scalar() or 0
        result = await self.session.execute(stmt)
        return [
            (AccountId(row["account_id"]), row_to_feedback(dict(row)))
            for row in result.mappings().all()
        ], total
