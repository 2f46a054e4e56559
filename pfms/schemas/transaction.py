# pfms/schemas/transaction.py
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import date, datetime
from pfms.models.transaction import TransactionType

class TransactionCreate(BaseModel):
    # Every field is optional here so absent ones become MissingFields (400)
    # in the route instead of a framework validation error.
    date: Optional[str] = Field(None, description="Calendar date, YYYY-MM-DD")
    type: Optional[TransactionType] = None
    category: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[float] = Field(None, ge=0)

    @field_validator("date", "type", "category", "description", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("date")
    @classmethod
    def normalize_date(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return date.fromisoformat(v[:10]).isoformat()

class TransactionRead(BaseModel):
    id: int
    date: str
    type: TransactionType
    category: Optional[str] = None
    description: Optional[str] = None
    amount: float
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class TransactionListResponse(BaseModel):
    ok: bool = True
    transactions: List[TransactionRead]

class TransactionCreateResponse(BaseModel):
    ok: bool = True
    transaction: TransactionRead

class TransactionDeleteResponse(BaseModel):
    ok: bool = True
    deleted: int
