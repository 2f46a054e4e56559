# pfms/crud/budget.py
import logging
from typing import List

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.dialects import postgresql, sqlite

from pfms.core.errors import Conflict
from pfms.models.budget import Budget

logger = logging.getLogger(__name__)

# Dialects with INSERT ... ON CONFLICT DO UPDATE
UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}

async def list_budgets(db: AsyncSession) -> List[Budget]:
    result = await db.execute(select(Budget))
    return result.scalars().all()

async def upsert_budget(month: int, year: int, amount: float, db: AsyncSession) -> None:
    """Insert the (month, year) budget or overwrite its amount.

    Uses a single ON CONFLICT statement where the dialect has one, so two
    concurrent calls for the same key cannot both insert.
    """
    dialect = db.get_bind().dialect.name
    insert = UPSERT_INSERTS.get(dialect)
    if insert is None:
        await _update_then_insert(month, year, amount, db)
        return

    stmt = insert(Budget).values(month=month, year=year, amount=amount)
    stmt = stmt.on_conflict_do_update(
        index_elements=[Budget.month, Budget.year],
        set_={"amount": stmt.excluded.amount},
    )
    await db.execute(stmt)
    await db.commit()

async def _update_then_insert(month: int, year: int, amount: float, db: AsyncSession) -> None:
    result = await db.execute(
        update(Budget)
        .where(Budget.month == month, Budget.year == year)
        .values(amount=amount)
    )
    if result.rowcount == 0:
        await insert_budget(month, year, amount, db)
    else:
        await db.commit()

async def insert_budget(month: int, year: int, amount: float, db: AsyncSession) -> Budget:
    """Plain insert; a duplicate (month, year) raises Conflict."""
    budget = Budget(month=month, year=year, amount=amount)
    db.add(budget)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.warning(f"Budget for {year}-{month + 1:02d} was inserted concurrently")
        raise Conflict(f"Budget for month {month} of {year} already exists")
    await db.refresh(budget)
    return budget
