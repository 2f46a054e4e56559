from datetime import datetime


def test_dashboard_for_selected_month(client):
    year = datetime.now().year
    client.post("/api/transactions", json={"date": f"{year}-03-02", "type": "income", "amount": 8000})
    client.post("/api/transactions", json={"date": f"{year}-03-05", "type": "expense", "category": "Food", "amount": 3000})
    client.post("/api/transactions", json={"date": f"{year}-03-09", "type": "expense", "category": "Fuel", "amount": 1500})
    client.post("/api/budgets", json={"month": 2, "year": year, "amount": 5000})

    resp = client.get("/api/dashboard", params={"month": 2})
    assert resp.status_code == 200
    body = resp.json()

    assert body["ok"] is True
    assert body["month"] == 2
    assert body["year"] == year
    assert body["monthly"]["labels"][2] == "Mar"
    assert body["monthly"]["savings"][2] == 3500
    # slices follow the listing order, newest first
    assert body["categories"] == [
        {"category": "Fuel", "amount": 1500},
        {"category": "Food", "amount": 3000},
    ]
    assert body["budget"]["has_budget"] is True
    assert body["budget"]["percent"] == 90
    assert body["budget"]["level"] == "warning"


def test_dashboard_empty_month(client):
    resp = client.get("/api/dashboard", params={"month": 6, "year": 2030})
    body = resp.json()

    assert body["categories"] == [{"category": "No Data", "amount": 1}]
    assert body["budget"]["has_budget"] is False
    assert body["monthly"]["savings"] == [0] * 12


def test_dashboard_defaults_to_current_month(client):
    now = datetime.now()
    body = client.get("/api/dashboard").json()
    assert body["month"] == now.month - 1
    assert body["year"] == now.year
