# pfms/crud/user.py
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from pfms.core.security import get_password_hash, verify_password
from pfms.models.user import User

logger = logging.getLogger(__name__)

async def get_user_by_username(username: str, db: AsyncSession) -> Optional[User]:
    result = await db.execute(select(User).where(User.username == username))
    return result.scalar_one_or_none()

async def get_user_by_id(user_id: int, db: AsyncSession) -> Optional[User]:
    result = await db.execute(select(User).where(User.id == user_id))
    return result.scalar_one_or_none()

async def create_user(username: str, password: str, db: AsyncSession) -> User:
    user = User(username=username, password=get_password_hash(password))
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user

async def authenticate(username: str, password: str, db: AsyncSession) -> Optional[User]:
    """Return the user when both username and password match exactly."""
    user = await get_user_by_username(username, db)
    if user is None or not verify_password(password, user.password):
        return None
    return user

async def ensure_user(username: str, password: str, db: AsyncSession) -> bool:
    """Create the login if it does not exist yet. Returns True when created."""
    if await get_user_by_username(username, db) is not None:
        return False
    await create_user(username, password, db)
    logger.info(f"Inserted seed user {username}")
    return True
