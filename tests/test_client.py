from datetime import datetime, timedelta

import pytest

from pfms.client import ApiClientError, PfmsClient, Session
from pfms.core.config import settings
from pfms.core.security import create_access_token


@pytest.fixture
def api(client):
    # TestClient is an httpx.Client bound to the app
    return PfmsClient(http=client)


def test_failed_login_never_opens_session(api):
    with pytest.raises(ApiClientError) as exc:
        api.login("admin", "wrong")

    assert exc.value.status_code == 401
    assert exc.value.message == "Invalid credentials"
    assert api.session is None
    assert api.logged_in is False


def test_login_requires_both_fields(api):
    with pytest.raises(ApiClientError):
        api.login("admin", "")
    assert api.session is None


def test_login_and_logout(api):
    session = api.login("admin", "admin")

    assert api.logged_in is True
    assert session.token
    assert isinstance(session.user_id, int)

    api.logout()
    assert api.logged_in is False


def test_session_token_sent_when_auth_required(api, monkeypatch):
    monkeypatch.setattr(settings, "REQUIRE_AUTH", True)

    with pytest.raises(ApiClientError) as exc:
        api.list_budgets()
    assert exc.value.status_code == 401

    api.login("admin", "admin")
    assert api.list_budgets() == []

    api.logout()
    with pytest.raises(ApiClientError):
        api.list_transactions()


def test_mutations_trigger_refresh(api):
    year = datetime.now().year
    seen = []
    api.on_refresh(seen.append)

    state = api.add_transaction(4, date=f"{year}-05-03", type="expense", category="Food", amount=900)
    assert len(seen) == 1
    assert seen[0] is state
    assert [t["amount"] for t in state.transactions] == [900]
    assert state.categories == {"Food": 900}
    assert state.budget.has_budget is False

    state = api.set_budget(4, 1000)
    assert len(seen) == 2
    assert state.budget.has_budget is True
    assert state.budget.level == "warning"

    state = api.remove_transaction(4, state.transactions[0]["id"])
    assert len(seen) == 3
    assert state.transactions == []
    assert state.categories == {"No Data": 1}
    assert state.budget.spent == 0


def test_add_transaction_checks_date_and_amount(api):
    with pytest.raises(ApiClientError):
        api.add_transaction(0, date="", type="income", amount=10)
    with pytest.raises(ApiClientError):
        api.add_transaction(0, date="2025-01-01", type="income", amount=0)

    assert api.list_transactions() == []


def test_server_errors_are_raised(api):
    with pytest.raises(ApiClientError) as exc:
        api.create_transaction({"date": "2025-01-01", "type": "expense"})
    assert exc.value.status_code == 400
    assert exc.value.message == "Missing fields"


def test_ping(api):
    assert api.ping() > 0


def expire_session(api):
    token, expires_at = create_access_token(str(api.session.user_id), expires_delta=timedelta(seconds=-10))
    api.session = Session(user_id=api.session.user_id, token=token, expires_at=expires_at)


def test_expired_session_is_dropped_on_open_api(api):
    api.login("admin", "admin")
    expire_session(api)

    assert api.list_budgets() == []
    assert api.session is None


def test_expired_session_does_not_authorize(api, monkeypatch):
    monkeypatch.setattr(settings, "REQUIRE_AUTH", True)
    api.login("admin", "admin")
    expire_session(api)

    with pytest.raises(ApiClientError) as exc:
        api.list_transactions()
    assert exc.value.status_code == 401
    assert exc.value.message == "Not authenticated"
    assert api.logged_in is False
