# pfms/api/v1/routes/auth.py
import logging
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pfms.core.database import get_async_session
from pfms.core.errors import InvalidCredentials, MissingFields
from pfms.core.security import create_access_token
from pfms.crud.user import authenticate
from pfms.schemas.auth import LoginRequest, LoginResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Authentication"])

@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: LoginRequest,
    db: AsyncSession = Depends(get_async_session),
):
    """
    Check a username/password pair and open a session.

    Returns the user id plus a bearer token and its expiry; the token is
    what clients send on later requests.
    """
    if not credentials.username or not credentials.password:
        raise MissingFields()

    user = await authenticate(credentials.username, credentials.password, db)
    if user is None:
        logger.info(f"Rejected login for {credentials.username!r}")
        raise InvalidCredentials()

    token, expires_at = create_access_token(str(user.id))
    return LoginResponse(user_id=user.id, token=token, expires_at=expires_at)
