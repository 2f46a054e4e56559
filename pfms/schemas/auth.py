# pfms/schemas/auth.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime

class LoginRequest(BaseModel):
    username: Optional[str] = None
    password: Optional[str] = None

class LoginResponse(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    user_id: int = Field(..., alias="userId")
    token: str
    expires_at: datetime = Field(..., alias="expiresAt")

class PingResponse(BaseModel):
    ok: bool = True
    ts: int = Field(..., description="Server time in epoch milliseconds")
