# pfms/api/v1/routes/system.py
import time
from fastapi import APIRouter

from pfms.schemas.auth import PingResponse

router = APIRouter(tags=["Health"])

@router.get("/ping", response_model=PingResponse)
async def ping():
    return PingResponse(ts=int(time.time() * 1000))
