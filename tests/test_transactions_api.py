import uuid

import pytest

from ledger_server.interfaces.http.deps import get_transaction_repository

COOKIE = "sessionId"


def _use_session(client, session_id):
    client.cookies.clear()
    if session_id is not None:
        client.cookies.set(COOKIE, session_id)


def _create(client, title, amount, type):
    response = client.post("/transactions", json={"title": title, "amount": amount, "type": type})
    assert response.status_code == 201
    return response


def test_salary_and_rent_scenario(client):
    response = _create(client, "Salary", 5000, "credit")
    assert response.content == b""
    session_id = response.cookies.get(COOKIE)
    assert uuid.UUID(session_id)

    set_cookie = response.headers["set-cookie"].lower()
    assert "max-age=604800" in set_cookie
    assert "path=/" in set_cookie

    _use_session(client, session_id)
    response = _create(client, "Rent", 1200, "debit")
    assert "set-cookie" not in response.headers

    listing = client.get("/transactions").json()["transactions"]
    assert [(tx["title"], tx["amount"]) for tx in listing] == [("Salary", 5000), ("Rent", -1200)]
    assert all(tx["session_id"] == session_id for tx in listing)

    summary = client.get("/transactions/summary")
    assert summary.status_code == 200
    assert summary.json() == {"summary": {"amount": 3800}}


def test_post_without_cookie_always_issues_new_session(client):
    first = _create(client, "A", 1, "credit").cookies.get(COOKIE)
    client.cookies.clear()
    second = _create(client, "B", 1, "credit").cookies.get(COOKIE)

    assert first and second
    assert first != second


def test_round_trip_by_id(client):
    session_id = _create(client, "Groceries", 42.5, "debit").cookies.get(COOKIE)
    _use_session(client, session_id)

    listing = client.get("/transactions").json()["transactions"]
    assert len(listing) == 1
    tx_id = listing[0]["id"]

    response = client.get(f"/transactions/{tx_id}")
    assert response.status_code == 200
    body = response.json()["transactions"]
    assert body["id"] == tx_id
    assert body["title"] == "Groceries"
    assert body["amount"] == -42.5


def test_cents_survive_storage(client):
    session_id = _create(client, "Salary", 1234.56, "credit").cookies.get(COOKIE)
    _use_session(client, session_id)
    _create(client, "Coffee", 0.01, "debit")

    listing = client.get("/transactions").json()["transactions"]
    assert [tx["amount"] for tx in listing] == [1234.56, -0.01]
    tx_id = listing[0]["id"]
    assert client.get(f"/transactions/{tx_id}").json()["transactions"]["amount"] == 1234.56
    assert client.get("/transactions/summary").json() == {"summary": {"amount": 1234.55}}


def test_created_at_is_reported_in_utc(client):
    session_id = _create(client, "Salary", 10, "credit").cookies.get(COOKIE)
    _use_session(client, session_id)

    created_at = client.get("/transactions").json()["transactions"][0]["created_at"]

    assert created_at.endswith(("Z", "+00:00"))


def test_other_sessions_rows_look_missing(client):
    owner = _create(client, "Salary", 5000, "credit").cookies.get(COOKIE)
    _use_session(client, owner)
    tx_id = client.get("/transactions").json()["transactions"][0]["id"]

    client.cookies.clear()
    intruder = _create(client, "Coffee", 3, "debit").cookies.get(COOKIE)
    _use_session(client, intruder)

    response = client.get(f"/transactions/{tx_id}")
    assert response.status_code == 200
    assert response.json() == {"transactions": None}
    assert [tx["title"] for tx in client.get("/transactions").json()["transactions"]] == ["Coffee"]


def test_unknown_id_looks_missing(client):
    _use_session(client, str(uuid.uuid4()))

    response = client.get(f"/transactions/{uuid.uuid4()}")

    assert response.status_code == 200
    assert response.json() == {"transactions": None}


def test_session_without_rows_has_zero_summary(client):
    _use_session(client, str(uuid.uuid4()))

    assert client.get("/transactions/summary").json() == {"summary": {"amount": 0}}
    assert client.get("/transactions").json() == {"transactions": []}


@pytest.mark.parametrize(
    "path",
    ["/transactions", "/transactions/summary", f"/transactions/{uuid.uuid4()}"],
)
def test_protected_routes_require_cookie(client, path):
    client.cookies.clear()

    response = client.get(path)

    assert response.status_code == 401
    assert response.json() == {"detail": "Unauthorized."}


def test_malformed_cookie_is_rejected(client):
    _use_session(client, "not-a-uuid")

    assert client.get("/transactions").status_code == 401


def test_post_with_malformed_cookie_issues_new_session(client):
    _use_session(client, "not-a-uuid")

    response = _create(client, "Salary", 10, "credit")

    assert uuid.UUID(response.cookies.get(COOKIE))


def test_invalid_id_is_rejected_before_storage(client, fake_repository):
    client.app.dependency_overrides[get_transaction_repository] = lambda: fake_repository
    _use_session(client, str(uuid.uuid4()))

    response = client.get("/transactions/abc")

    assert response.status_code == 422
    assert fake_repository.calls == []


@pytest.mark.parametrize(
    "body",
    [
        {"amount": 10, "type": "credit"},
        {"title": "", "amount": 10, "type": "credit"},
        {"title": "   ", "amount": 10, "type": "credit"},
        {"title": "Rent", "amount": "abc", "type": "debit"},
        {"title": "Rent", "amount": -5, "type": "debit"},
        {"title": "Rent", "amount": 10, "type": "transfer"},
        {"title": "Rent", "type": "debit"},
        {"title": "Rent", "amount": "5000", "type": "debit"},
        {"title": "Rent", "amount": True, "type": "debit"},
        {"title": "Dust", "amount": 0.005, "type": "credit"},
        {"title": "Lottery", "amount": 1e20, "type": "credit"},
    ],
)
def test_invalid_body_writes_nothing(client, fake_repository, body):
    client.app.dependency_overrides[get_transaction_repository] = lambda: fake_repository
    client.cookies.clear()

    response = client.post("/transactions", json=body)

    assert response.status_code == 422
    assert "set-cookie" not in response.headers
    assert fake_repository.rows == []


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
