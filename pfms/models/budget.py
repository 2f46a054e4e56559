# pfms/models/budget.py
from sqlalchemy import Column, Float, Integer, UniqueConstraint
from pfms.core.database import Base

class Budget(Base):
    __tablename__ = "budgets"
    __table_args__ = (
        UniqueConstraint("month", "year", name="uq_budgets_month_year"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    month = Column(Integer, nullable=False)  # 0-11
    year = Column(Integer, nullable=False)
    amount = Column(Float, nullable=False)

    def __repr__(self):
        return f"<Budget {self.year}-{self.month + 1:02d} amount={self.amount}>"
