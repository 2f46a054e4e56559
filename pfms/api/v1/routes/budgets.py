# pfms/api/v1/routes/budgets.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pfms.api.deps import require_session
from pfms.core.database import get_async_session
from pfms.core.errors import MissingFields
from pfms.crud.budget import list_budgets, upsert_budget
from pfms.schemas.budget import (
    BudgetListResponse,
    BudgetRead,
    BudgetSet,
    BudgetUpsertResponse,
)

router = APIRouter(
    prefix="/budgets",
    tags=["budgets"],
    dependencies=[Depends(require_session)],
)

@router.get("", response_model=BudgetListResponse)
async def read_budgets(db: AsyncSession = Depends(get_async_session)):
    """Every budget row, unfiltered. Clients match month/year themselves."""
    rows = await list_budgets(db)
    return BudgetListResponse(budgets=[BudgetRead.model_validate(r) for r in rows])

@router.post("", response_model=BudgetUpsertResponse)
async def set_budget(
    budget_in: BudgetSet,
    db: AsyncSession = Depends(get_async_session),
):
    """
    Set the budget of one calendar month.

    - **month**: 0-11
    - **year**: e.g. 2025
    - **amount**: replaces any existing amount for that month
    """
    if budget_in.month is None or budget_in.year is None or budget_in.amount is None:
        raise MissingFields()

    await upsert_budget(budget_in.month, budget_in.year, budget_in.amount, db)
    return BudgetUpsertResponse()
