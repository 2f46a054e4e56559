# pfms/models/transaction.py
from sqlalchemy import Column, String, Float, Enum, DateTime, Integer, func
from pfms.core.database import Base
import enum

class TransactionType(str, enum.Enum):
    income = "income"
    expense = "expense"

class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # Calendar date kept as a YYYY-MM-DD string; month filters match its prefix
    date = Column(String(length=10), nullable=False, index=True)
    type = Column(Enum(TransactionType, native_enum=False, length=10), nullable=False)
    category = Column(String(length=100), nullable=True)
    description = Column(String(length=255), nullable=True)
    amount = Column(Float, nullable=False)

    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Transaction id={self.id} type={self.type} amount={self.amount} date={self.date}>"
