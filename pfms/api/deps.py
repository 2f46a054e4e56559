# pfms/api/deps.py
from typing import Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from pfms.core.config import settings
from pfms.core.database import get_async_session
from pfms.core.errors import NotAuthenticated
from pfms.core.security import decode_access_token
from pfms.crud.user import get_user_by_id
from pfms.models.user import User

optional_security = HTTPBearer(auto_error=False)

def _token_from_request(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials],
) -> Optional[str]:
    """Token from the Authorization header, falling back to an access_token cookie."""
    if credentials and credentials.credentials:
        return credentials.credentials
    token = request.cookies.get("access_token")
    if token and token.startswith("Bearer "):
        token = token[7:]
    return token or None

async def get_optional_current_user(
    request: Request,
    db: AsyncSession = Depends(get_async_session),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(optional_security),
) -> Optional[User]:
    """
    Resolve the session token to a user.

    No token gives None; a token that is present but invalid, expired or
    pointing at a deleted user is always rejected.
    """
    token = _token_from_request(request, credentials)
    if token is None:
        return None

    subject = decode_access_token(token)
    if subject is None:
        raise NotAuthenticated("Invalid or expired token")
    try:
        user_id = int(subject)
    except ValueError:
        raise NotAuthenticated("Invalid token")

    user = await get_user_by_id(user_id, db)
    if user is None:
        raise NotAuthenticated("User not found")
    return user

async def require_session(
    user: Optional[User] = Depends(get_optional_current_user),
) -> Optional[User]:
    """Gate for data endpoints; only enforced when REQUIRE_AUTH is on."""
    if user is None and settings.REQUIRE_AUTH:
        raise NotAuthenticated()
    return user
