# pfms/utils/views.py
"""
Derived dashboard views: monthly totals, category breakdown and budget
progress.

Everything here is recomputed from the flat transaction and budget
collections on every call. Rows may be ORM instances (server side) or plain
dicts decoded from the JSON API (client side).
"""
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]

NO_DATA_LABEL = "No Data"
UNCATEGORIZED = "Uncategorized"
CURRENCY = "₹"

# Spend above this share of the budget turns the bar to the warning colour
WARNING_PERCENT = 80.0

COLORS = {
    "none": "#34d399",
    "ok": "#34d399",
    "warning": "#ffd166",
    "danger": "#ff6b6b",
}


# ────────────────────────────────────────────────────────────────────────────────
# RESULT TYPES
# ────────────────────────────────────────────────────────────────────────────────
@dataclass
class MonthlyTotals:
    income: List[float]
    expense: List[float]
    savings: List[float]
    labels: List[str] = field(default_factory=lambda: list(MONTH_LABELS))


@dataclass
class BudgetProgress:
    has_budget: bool
    budget: Optional[float]
    spent: float
    percent: float
    level: str
    color: str
    message: str


@dataclass
class DashboardView:
    month: int
    year: int
    monthly: MonthlyTotals
    categories: Dict[str, float]
    budget: BudgetProgress
    transactions: List[Any]


# ────────────────────────────────────────────────────────────────────────────────
# HELPERS
# ────────────────────────────────────────────────────────────────────────────────
def _get(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(name)
    return getattr(row, name, None)


def month_of(date_value: str) -> int:
    """0-based month of a ``YYYY-MM-DD`` date string."""
    return int(str(date_value)[5:7]) - 1


def format_amount(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else f"{value:.2f}"


# ────────────────────────────────────────────────────────────────────────────────
# VIEWS
# ────────────────────────────────────────────────────────────────────────────────
def monthly_totals(transactions: Iterable[Any]) -> MonthlyTotals:
    """Income, expense and savings per calendar month, summed across years."""
    income = [0.0] * 12
    expense = [0.0] * 12
    for tx in transactions:
        m = month_of(_get(tx, "date"))
        amount = float(_get(tx, "amount") or 0)
        if _get(tx, "type") == "income":
            income[m] += amount
        else:
            expense[m] += amount
    savings = [inc - exp for inc, exp in zip(income, expense)]
    return MonthlyTotals(income=income, expense=expense, savings=savings)


def category_breakdown(transactions: Iterable[Any]) -> Dict[str, float]:
    """Expense amount per category, or a single placeholder slice when empty."""
    categories: Dict[str, float] = {}
    for tx in transactions:
        if _get(tx, "type") != "expense":
            continue
        name = _get(tx, "category") or UNCATEGORIZED
        categories[name] = categories.get(name, 0.0) + float(_get(tx, "amount") or 0)
    if not categories:
        return {NO_DATA_LABEL: 1.0}
    return categories


def find_budget(budgets: Iterable[Any], month: int, year: int) -> Optional[float]:
    for b in budgets:
        if _get(b, "month") == month and _get(b, "year") == year:
            return float(_get(b, "amount"))
    return None


def budget_progress(month_expense: float, budget_amount: Optional[float]) -> BudgetProgress:
    """Budget-vs-actual indicator.

    A zero amount counts as "no budget". The percentage is capped at 100 but
    the danger level compares actual spend with the budget, so an exceeded
    budget is reported as such even though the bar shows 100%.
    """
    spent = float(month_expense or 0)
    if not budget_amount:
        return BudgetProgress(
            has_budget=False,
            budget=None,
            spent=spent,
            percent=0.0,
            level="none",
            color=COLORS["none"],
            message="No budget set for selected month.",
        )

    budget = float(budget_amount)
    percent = min(spent * 100 / budget, 100.0)
    if spent > budget:
        level = "danger"
    elif percent > WARNING_PERCENT:
        level = "warning"
    else:
        level = "ok"
    message = (
        f"Spent {CURRENCY}{format_amount(spent)} / {CURRENCY}{format_amount(budget)} "
        f"({int(percent + 0.5)}%)"
    )
    return BudgetProgress(
        has_budget=True,
        budget=budget,
        spent=spent,
        percent=percent,
        level=level,
        color=COLORS[level],
        message=message,
    )


def build_dashboard(
    all_transactions: List[Any],
    month_transactions: List[Any],
    budgets: List[Any],
    month: int,
    year: int,
) -> DashboardView:
    """Assemble every view for the selected month of ``year``.

    The budget bar uses the month's expense from the monthly totals, which
    sum that month over all years.
    """
    totals = monthly_totals(all_transactions)
    return DashboardView(
        month=month,
        year=year,
        monthly=totals,
        categories=category_breakdown(month_transactions),
        budget=budget_progress(totals.expense[month], find_budget(budgets, month, year)),
        transactions=list(month_transactions),
    )
