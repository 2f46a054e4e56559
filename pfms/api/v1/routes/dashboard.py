# pfms/api/v1/routes/dashboard.py
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from pfms.api.deps import require_session
from pfms.core.database import get_async_session
from pfms.crud.budget import list_budgets
from pfms.crud.transaction import list_transactions
from pfms.schemas.dashboard import (
    BudgetProgressRead,
    CategorySlice,
    DashboardResponse,
    MonthlySeries,
)
from pfms.utils.views import build_dashboard

router = APIRouter(
    prefix="/dashboard",
    tags=["dashboard"],
    dependencies=[Depends(require_session)],
)

@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    month: Optional[int] = Query(None, ge=0, le=11, description="Defaults to the current month"),
    year: Optional[int] = Query(None, description="Defaults to the current year"),
    db: AsyncSession = Depends(get_async_session),
):
    """
    Returns every derived view for one month in a single response:
    - monthly: income / expense / savings series, Jan-Dec, all years summed
    - categories: expense per category for the selected month
    - budget: budget-vs-actual progress for the selected month
    """
    now = datetime.now()
    month = now.month - 1 if month is None else month
    year = now.year if year is None else year

    all_transactions = await list_transactions(db)
    month_transactions = await list_transactions(db, month=month, year=year)
    budgets = await list_budgets(db)

    view = build_dashboard(all_transactions, month_transactions, budgets, month, year)
    return DashboardResponse(
        month=view.month,
        year=view.year,
        monthly=MonthlySeries.model_validate(view.monthly),
        categories=[CategorySlice(category=k, amount=v) for k, v in view.categories.items()],
        budget=BudgetProgressRead.model_validate(view.budget),
    )
