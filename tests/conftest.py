import asyncio
import os
import tempfile
from pathlib import Path

# Settings are read at import time, so point them at a scratch database first
_DB_DIR = tempfile.mkdtemp(prefix="pfms-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{Path(_DB_DIR) / 'test.db'}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["STATIC_DIR"] = ""
os.environ["REQUIRE_AUTH"] = "false"

import pytest
from fastapi.testclient import TestClient

from pfms.core.database import AsyncSessionLocal, Base, engine
from pfms.main import app
from pfms.models import budget, transaction, user  # noqa: F401


async def reset_database():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@pytest.fixture
def client():
    asyncio.run(reset_database())
    # Entering the context runs the startup event, which seeds admin/admin
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers(client):
    resp = client.post("/api/login", json={"username": "admin", "password": "admin"})
    assert resp.status_code == 200
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
async def db():
    await reset_database()
    async with AsyncSessionLocal() as session:
        yield session
