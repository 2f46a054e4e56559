# pfms/schemas/budget.py
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

class BudgetSet(BaseModel):
    month: Optional[int] = Field(None, ge=0, le=11, description="0 = January")
    year: Optional[int] = None
    amount: Optional[float] = Field(None, ge=0)

class BudgetRead(BaseModel):
    month: int
    year: int
    amount: float

    model_config = ConfigDict(from_attributes=True)

class BudgetListResponse(BaseModel):
    ok: bool = True
    budgets: List[BudgetRead]

class BudgetUpsertResponse(BaseModel):
    ok: bool = True
    upserted: bool = True
