# pfms/main.py
import uvicorn
from contextlib import asynccontextmanager
import logging
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from pfms.core.config import settings
from pfms.core.database import AsyncSessionLocal, create_db_and_tables, engine
from pfms.core.db_utils import with_db_retry
from pfms.core.errors import ApiError, Conflict, DbError, InvalidFields, MissingFields
from pfms.crud.user import ensure_user
from pfms.api.v1.routes import (
    auth,
    budgets,
    dashboard,
    system,
    transactions,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ------------------------------------------------------------
# STARTUP
# ------------------------------------------------------------
@with_db_retry(max_retries=5, retry_delay=1.0)
async def init_database() -> None:
    """Create tables and the seed login if missing."""
    await create_db_and_tables()
    async with AsyncSessionLocal() as session:
        await ensure_user(settings.ADMIN_USERNAME, settings.ADMIN_PASSWORD, session)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare the database before serving requests"""
    await init_database()
    logger.info(f"✅ Database ready: {engine.url.render_as_string(hide_password=True)}")
    logger.info(f"✅ PFMS backend listening on port {settings.PORT}")
    yield
    await engine.dispose()

app = FastAPI(
    lifespan=lifespan,
    title=settings.APP_NAME,
    version=settings.VERSION,
    description="Personal finance dashboard API - transactions, monthly budgets and derived views",
    openapi_tags=[
        {"name": "Authentication", "description": "Login and session tokens"},
        {"name": "transactions", "description": "Income and expense records"},
        {"name": "budgets", "description": "One budget per calendar month"},
        {"name": "dashboard", "description": "Monthly totals, category breakdown, budget progress"},
    ],
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ------------------------------------------------------------
# ERROR HANDLERS
# ------------------------------------------------------------
def error_response(exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"ok": False, "error": exc.message},
    )

@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return error_response(exc)

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if errors and all(err.get("type") == "missing" for err in errors):
        return error_response(MissingFields())
    logger.info(f"Rejected request to {request.url.path}: {errors}")
    return error_response(InvalidFields())

@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Constraint violation on {request.url.path}: {exc.orig}")
    return error_response(Conflict())

@app.exception_handler(SQLAlchemyError)
async def db_error_handler(request: Request, exc: SQLAlchemyError):
    # Never leak driver details to the caller
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
    return error_response(DbError())

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=500,
        content={"ok": False, "error": "Internal server error"},
    )

# ------------------------------------------------------------
# API ROUTES
# ------------------------------------------------------------
app.include_router(auth.router, prefix="/api")
app.include_router(transactions.router, prefix="/api")
app.include_router(budgets.router, prefix="/api")
app.include_router(dashboard.router, prefix="/api")
app.include_router(system.router, prefix="/api")

# ------------------------------------------------------------
# STATIC FRONTEND
# ------------------------------------------------------------
def mount_static(target: FastAPI, directory: str) -> bool:
    """Serve index.html, dashboard.html and assets/ from ``directory`` at /."""
    if not directory:
        return False
    path = Path(directory)
    if not path.is_dir():
        logger.warning(f"STATIC_DIR {directory} does not exist, frontend not served")
        return False
    # Mounted last so it never shadows /api routes
    target.mount("/", StaticFiles(directory=str(path), html=True), name="static")
    return True

mount_static(app, settings.STATIC_DIR)

if __name__ == "__main__":
    uvicorn.run("pfms.main:app", host="0.0.0.0", port=settings.PORT, reload=False)
