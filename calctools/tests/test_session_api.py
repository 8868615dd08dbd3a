from __future__ import annotations

from flask.testing import FlaskClient


def test_session_endpoint_returns_defaults(client: FlaskClient):
    resp = client.get("/api/session")

    assert resp.status_code == 200
    state = resp.get_json()
    assert state["selected_tool"] is None
    assert state["discount"]["discounts"] == ["20"]


def test_dispatch_selects_tool_and_evaluates(client: FlaskClient):
    state = client.get("/api/session").get_json()

    resp = client.post(
        "/api/session/dispatch",
        json={"state": state, "action": {"type": "select_tool", "tool": "discount-calculator"}},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["state"]["selected_tool"] == "discount-calculator"
    assert body["result"]["single"]["final_price"] == 8000


def test_dispatch_chains_state(client: FlaskClient):
    state = client.get("/api/session").get_json()
    actions = [
        {"type": "select_tool", "tool": "stock-average"},
        {"type": "set_field", "form": "stock", "field": "new_price", "value": 6000},
        {"type": "set_field", "form": "stock", "field": "new_quantity", "value": "10"},
        {"type": "add_purchase"},
    ]

    body = None
    for action in actions:
        resp = client.post("/api/session/dispatch", json={"state": state, "action": action})
        assert resp.status_code == 200
        body = resp.get_json()
        state = body["state"]

    assert [row["id"] for row in state["stock"]["purchases"]] == [1, 2]
    assert body["result"]["holdings"]["average_price"] == 8000


def test_dispatch_without_state_starts_fresh(client: FlaskClient):
    resp = client.post("/api/session/dispatch", json={"action": {"type": "add_discount"}})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["state"]["discount"]["discounts"] == ["20", ""]
    assert body["result"] is None


def test_invalid_action_returns_400(client: FlaskClient):
    resp = client.post(
        "/api/session/dispatch",
        json={"action": {"type": "remove_purchase", "id": 1}},
    )

    assert resp.status_code == 400
    assert resp.get_json() == {"error": ["cannot remove the last purchase"]}


def test_unknown_action_type_returns_422(client: FlaskClient):
    resp = client.post("/api/session/dispatch", json={"action": {"type": "explode"}})

    assert resp.status_code == 422


def test_unknown_selected_tool_in_state_returns_422(client: FlaskClient):
    resp = client.post(
        "/api/session/dispatch",
        json={"state": {"selected_tool": "bogus"}, "action": {"type": "add_discount"}},
    )

    assert resp.status_code == 422


def test_over_limit_years_in_session_returns_422(client: FlaskClient):
    state = client.get("/api/session").get_json()
    state["selected_tool"] = "compound-interest"

    resp = client.post(
        "/api/session/dispatch",
        json={
            "state": state,
            "action": {"type": "set_field", "form": "compound", "field": "years", "value": "1e9"},
        },
    )

    assert resp.status_code == 422
