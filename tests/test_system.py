import time

from fastapi import FastAPI
from fastapi.testclient import TestClient

from pfms.main import mount_static


def test_ping_returns_epoch_millis(client):
    before = int(time.time() * 1000)
    body = client.get("/api/ping").json()
    after = int(time.time() * 1000)

    assert body["ok"] is True
    assert before <= body["ts"] <= after


def test_mount_static_serves_frontend(tmp_path):
    (tmp_path / "index.html").write_text("<h1>PFMS</h1>")
    frontend = FastAPI()

    assert mount_static(frontend, str(tmp_path)) is True
    with TestClient(frontend) as c:
        resp = c.get("/")
    assert resp.status_code == 200
    assert "PFMS" in resp.text


def test_mount_static_skips_missing_dir(tmp_path):
    frontend = FastAPI()
    assert mount_static(frontend, "") is False
    assert mount_static(frontend, str(tmp_path / "nope")) is False
