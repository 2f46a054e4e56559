# pfms/schemas/dashboard.py
from typing import List, Optional
from pydantic import BaseModel, ConfigDict

class MonthlySeries(BaseModel):
    labels: List[str]
    income: List[float]
    expense: List[float]
    savings: List[float]

    model_config = ConfigDict(from_attributes=True)

class CategorySlice(BaseModel):
    category: str
    amount: float

class BudgetProgressRead(BaseModel):
    has_budget: bool
    budget: Optional[float] = None
    spent: float
    percent: float
    level: str
    color: str
    message: str

    model_config = ConfigDict(from_attributes=True)

class DashboardResponse(BaseModel):
    ok: bool = True
    month: int
    year: int
    monthly: MonthlySeries
    categories: List[CategorySlice]
    budget: BudgetProgressRead
