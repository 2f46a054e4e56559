import pytest
from sqlalchemy.exc import IntegrityError

from pfms.api.v1.routes import budgets as budgets_routes
from pfms.core.errors import Conflict
from pfms.crud.budget import _update_then_insert, insert_budget, list_budgets, upsert_budget


def test_set_budget_twice_keeps_one_row(client):
    first = client.post("/api/budgets", json={"month": 2, "year": 2025, "amount": 5000})
    assert first.status_code == 200
    assert first.json() == {"ok": True, "upserted": True}

    second = client.post("/api/budgets", json={"month": 2, "year": 2025, "amount": 7500})
    assert second.json() == {"ok": True, "upserted": True}

    budgets = client.get("/api/budgets").json()
    assert budgets == {"ok": True, "budgets": [{"month": 2, "year": 2025, "amount": 7500}]}


def test_budgets_are_keyed_by_month_and_year(client):
    client.post("/api/budgets", json={"month": 2, "year": 2025, "amount": 5000})
    client.post("/api/budgets", json={"month": 2, "year": 2024, "amount": 4000})
    client.post("/api/budgets", json={"month": 3, "year": 2025, "amount": 3000})

    budgets = client.get("/api/budgets").json()["budgets"]
    assert sorted((b["year"], b["month"], b["amount"]) for b in budgets) == [
        (2024, 2, 4000),
        (2025, 2, 5000),
        (2025, 3, 3000),
    ]


def test_zero_values_count_as_present(client):
    resp = client.post("/api/budgets", json={"month": 0, "year": 2025, "amount": 0})
    assert resp.status_code == 200

    assert client.get("/api/budgets").json()["budgets"] == [{"month": 0, "year": 2025, "amount": 0}]


def test_set_budget_missing_fields(client):
    for payload in ({"year": 2025, "amount": 1}, {"month": 1, "amount": 1}, {"month": 1, "year": 2025}, {}):
        resp = client.post("/api/budgets", json=payload)
        assert resp.status_code == 400, payload
        assert resp.json() == {"ok": False, "error": "Missing fields"}


def test_set_budget_month_out_of_range(client):
    resp = client.post("/api/budgets", json={"month": 12, "year": 2025, "amount": 1})
    assert resp.status_code == 400
    assert resp.json()["error"] == "Invalid fields"


def test_constraint_violation_surfaces_as_conflict(client, monkeypatch):
    async def racing(*args, **kwargs):
        raise IntegrityError("INSERT INTO budgets", {}, Exception("UNIQUE constraint failed"))

    monkeypatch.setattr(budgets_routes, "upsert_budget", racing)

    resp = client.post("/api/budgets", json={"month": 2, "year": 2025, "amount": 5000})
    assert resp.status_code == 409
    assert resp.json() == {"ok": False, "error": "Conflict"}


async def test_upsert_overwrites_amount(db):
    await upsert_budget(5, 2025, 100, db)
    await upsert_budget(5, 2025, 250, db)

    rows = await list_budgets(db)
    assert [(b.month, b.year, b.amount) for b in rows] == [(5, 2025, 250)]


async def test_update_then_insert_fallback(db):
    await _update_then_insert(1, 2025, 10, db)
    await _update_then_insert(1, 2025, 20, db)

    rows = await list_budgets(db)
    assert [(b.month, b.year, b.amount) for b in rows] == [(1, 2025, 20)]


async def test_losing_insert_raises_conflict(db):
    await insert_budget(7, 2025, 10, db)

    with pytest.raises(Conflict):
        await insert_budget(7, 2025, 99, db)

    rows = await list_budgets(db)
    assert [(b.month, b.year, b.amount) for b in rows] == [(7, 2025, 10)]
