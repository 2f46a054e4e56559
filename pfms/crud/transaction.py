# pfms/crud/transaction.py
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import delete, desc, func
from pfms.models.transaction import Transaction, TransactionType
from typing import List, Optional

def month_prefix(month: int, year: int) -> str:
    """``YYYY-MM`` prefix for a 0-based month, as stored in Transaction.date."""
    return f"{year:04d}-{month + 1:02d}"

async def list_transactions(
    db: AsyncSession,
    month: Optional[int] = None,
    year: Optional[int] = None,
) -> List[Transaction]:
    """All transactions, or those of one calendar month when both month and year are given.

    Newest first: date descending, then id descending.
    """
    query = select(Transaction)
    if month is not None and year is not None:
        query = query.where(func.substr(Transaction.date, 1, 7) == month_prefix(month, year))
    query = query.order_by(desc(Transaction.date), desc(Transaction.id))
    result = await db.execute(query)
    return result.scalars().all()

async def create_transaction(
    db: AsyncSession,
    date: str,
    type: TransactionType,
    amount: float,
    category: Optional[str] = None,
    description: Optional[str] = None,
) -> Transaction:
    new_tx = Transaction(
        date=date,
        type=type,
        category=category,
        description=description,
        amount=amount,
    )
    db.add(new_tx)
    await db.commit()
    # Pull server-side defaults (created_at) back into the instance
    await db.refresh(new_tx)
    return new_tx

async def delete_transaction(transaction_id: int, db: AsyncSession) -> int:
    """Delete by id and return the number of rows removed (0 or 1)."""
    result = await db.execute(delete(Transaction).where(Transaction.id == transaction_id))
    await db.commit()
    return result.rowcount
