# pfms/models/user.py
from sqlalchemy import Column, Integer, String
from pfms.core.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(length=150), unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)  # passlib hash

    def __repr__(self):
        return f"<User username={self.username}>"
