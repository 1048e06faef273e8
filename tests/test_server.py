"""
Tests for the HTTP API.
"""
import pytest
from fastapi.testclient import TestClient

from password_game.server import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def default_settings(config_file):
    config_file("game:\n  rule_set: extended\n  display_order: errors_first\n  settle: false\n")


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_list_rules_default_set():
    r = client.get("/api/rules")
    assert r.status_code == 200
    data = r.json()
    assert data["rule_set"] == "extended"
    assert [rule["id"] for rule in data["rules"]] == list(range(1, 11))
    assert "validator" not in data["rules"][0]


def test_list_rules_unknown_set_returns_400():
    r = client.get("/api/rules", params={"rule_set": "nope"})
    assert r.status_code == 400


def test_first_update_reveals_rule_one():
    r = client.post("/api/update", json={"password": "a"})
    assert r.status_code == 200
    data = r.json()
    assert data["visible_ids"] == [1]
    assert [s["id"] for s in data["failing"]] == [1]
    assert data["length"] == 1
    assert data["complete"] is False


def test_round_trip_advances_one_rule():
    visible = []
    for value in ["a", "abcde", "abcde1"]:
        r = client.post("/api/update", json={"password": value, "visible_ids": visible})
        visible = r.json()["visible_ids"]
    assert visible == [1, 2, 3]


def test_errors_first_order():
    r = client.post("/api/update", json={"password": "abcde1", "visible_ids": [1, 2]})
    data = r.json()
    assert data["visible_ids"] == [1, 2, 3]
    assert [s["id"] for s in data["rules"]] == [3, 1, 2]


def test_ascending_order_override():
    r = client.post(
        "/api/update",
        json={"password": "abcde1", "visible_ids": [1, 2], "order": "ascending"},
    )
    assert [s["id"] for s in r.json()["rules"]] == [1, 2, 3]


def test_empty_password_resets():
    r = client.post("/api/update", json={"password": "", "visible_ids": [1, 2, 3]})
    data = r.json()
    assert data["visible_ids"] == []
    assert data["rules"] == []


def test_minimal_rule_set_with_settle():
    r = client.post(
        "/api/update",
        json={"password": "Abcde1", "rule_set": "minimal", "settle": True},
    )
    data = r.json()
    assert data["rule_set"] == "minimal"
    assert data["visible_ids"] == [1, 2, 3]
    assert data["complete"] is True


def test_unknown_rule_set_returns_400():
    r = client.post("/api/update", json={"password": "a", "rule_set": "nope"})
    assert r.status_code == 400


def test_invalid_order_returns_422():
    r = client.post("/api/update", json={"password": "a", "order": "sideways"})
    assert r.status_code == 422


def test_stray_visible_ids_do_not_complete():
    r = client.post(
        "/api/update",
        json={"password": "abcde1", "rule_set": "minimal", "visible_ids": [1, 2, 99]},
    )
    data = r.json()
    assert [s["id"] for s in data["rules"]] == [1, 2]
    assert data["complete"] is False
