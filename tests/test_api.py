import os
import tempfile

import pytest

from passmeter.config import DEFAULTS
from passmeter.errors import DictionaryLoadError
from passmeter.spweb.api import create_app


@pytest.fixture
def client():
    app = create_app(DEFAULTS.copy(), common_passwords=frozenset({"password", "123456"}))
    return app.test_client()


def test_home(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert b"running" in resp.data


def test_api_docs(client):
    resp = client.get("/api-docs")
    assert resp.status_code == 200
    assert "/api/v1/password/evaluate" in resp.get_json()["paths"]


def test_evaluate_common(client):
    resp = client.post("/api/v1/password/evaluate", json={"password": "password"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["password_length"] == 8
    assert body["keyspace_size"] == 26
    assert body["entropy_bits"] == 37.6
    assert body["is_in_common_list"] is True
    assert body["strength_category"] == "Very Weak (Common Password)"


def test_evaluate_strong(client):
    resp = client.post("/api/v1/password/evaluate", json={"password": "Tr0ub4dor&3"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["keyspace_size"] == 94
    assert body["strength_category"] == "Strong"
    assert body["is_in_common_list"] is False


@pytest.mark.parametrize("payload", [{}, {"password": 12345}, {"password": ""}, {"password": None}, ["password"]])
def test_bad_payload_rejected(client, payload):
    resp = client.post("/api/v1/password/evaluate", json=payload)
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_non_json_body_rejected(client):
    resp = client.post("/api/v1/password/evaluate", data="password", content_type="text/plain")
    assert resp.status_code == 400


def test_config_policy_is_used():
    cfg = DEFAULTS.copy()
    cfg["attack_rate_per_second"] = 1
    app = create_app(cfg, common_passwords=frozenset())
    resp = app.test_client().post("/api/v1/password/evaluate", json={"password": "abcdefgh"})
    assert resp.get_json()["estimated_crack_time"] == "More than a thousand years"


def test_dictionary_loaded_from_config():
    with tempfile.TemporaryDirectory() as td:
        path = os.path.join(td, "common.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write("1,hunter2\n")
        cfg = DEFAULTS.copy()
        cfg["common_passwords_path"] = path
        app = create_app(cfg)
        resp = app.test_client().post("/api/v1/password/evaluate", json={"password": "hunter2"})
        assert resp.get_json()["is_in_common_list"] is True


def test_missing_dictionary_prevents_startup():
    with tempfile.TemporaryDirectory() as td:
        cfg = DEFAULTS.copy()
        cfg["common_passwords_path"] = os.path.join(td, "missing.csv")
        with pytest.raises(DictionaryLoadError):
            create_app(cfg)


@pytest.mark.parametrize("rate,size", [("1e11", 32), (0, 32), (1e11, "32"), (1e11, 2.5), (None, None)])
def test_bad_policy_config_still_evaluates(rate, size):
    cfg = DEFAULTS.copy()
    cfg["attack_rate_per_second"] = rate
    cfg["symbol_pool_size"] = size
    app = create_app(cfg, common_passwords=frozenset())
    resp = app.test_client().post("/api/v1/password/evaluate", json={"password": "abc!"})
    assert resp.status_code == 200
    assert resp.get_json()["keyspace_size"] == 26 + 32
