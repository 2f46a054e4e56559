# pfms/api/v1/routes/transactions.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional

from pfms.api.deps import require_session
from pfms.core.database import get_async_session
from pfms.core.errors import MissingFields
from pfms.crud.transaction import (
    create_transaction,
    delete_transaction,
    list_transactions,
)
from pfms.schemas.transaction import (
    TransactionCreate,
    TransactionCreateResponse,
    TransactionDeleteResponse,
    TransactionListResponse,
    TransactionRead,
)

router = APIRouter(
    prefix="/transactions",
    tags=["transactions"],
    dependencies=[Depends(require_session)],
)

def parse_int(value: Optional[str]) -> Optional[int]:
    """Integer value of a query/path string, or None when it is not one."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None

@router.get("", response_model=TransactionListResponse)
async def read_transactions(
    month: Optional[str] = Query(None, description="0 = January; needs year"),
    year: Optional[str] = Query(None, description="Four digit year; needs month"),
    db: AsyncSession = Depends(get_async_session),
):
    """List transactions, newest first.

    Filtered to one month only when both month and year are integers; any
    other value lists everything.
    """
    rows = await list_transactions(db, month=parse_int(month), year=parse_int(year))
    return TransactionListResponse(
        transactions=[TransactionRead.model_validate(r) for r in rows]
    )

@router.post("", response_model=TransactionCreateResponse)
async def add_transaction(
    tx_in: TransactionCreate,
    db: AsyncSession = Depends(get_async_session),
):
    if tx_in.date is None or tx_in.type is None or tx_in.amount is None:
        raise MissingFields()

    tx = await create_transaction(
        db,
        date=tx_in.date,
        type=tx_in.type,
        amount=tx_in.amount,
        category=tx_in.category,
        description=tx_in.description,
    )
    return TransactionCreateResponse(transaction=TransactionRead.model_validate(tx))

@router.delete("/{transaction_id}", response_model=TransactionDeleteResponse)
async def remove_transaction(
    transaction_id: str,
    db: AsyncSession = Depends(get_async_session),
):
    # A missing or malformed id is not an error, it just deletes nothing
    tx_id = parse_int(transaction_id)
    if tx_id is None:
        return TransactionDeleteResponse(deleted=0)
    deleted = await delete_transaction(tx_id, db)
    return TransactionDeleteResponse(deleted=deleted)
