import pytest
from frontend.web import app as flask_app

SOURCE = "\\section{Intro}\nThe quick brown fox.\nAnother line."


@pytest.fixture()
def client():
    return flask_app.test_client()


@pytest.mark.e2e
def test_health(client):
    rv = client.get("/api/health")
    assert rv.status_code == 200
    assert rv.get_json() == {"ok": True}


@pytest.mark.e2e
def test_locate_returns_match_json(client):
    rv = client.post("/api/locate", json={"query": "quick brown", "source": SOURCE, "line": 0, "column": 0})
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["ok"] is True
    m = data["match"]
    for key in ("line", "column", "text", "confidence", "matcher"):
        assert key in m
    assert (m["line"], m["column"], m["confidence"]) == (1, 4, 1.0)
    assert data["low_confidence"] is False
    assert "The quick brown fox." in data["context"]


@pytest.mark.e2e
def test_locate_without_match(client):
    rv = client.post("/api/locate", json={"query": "zzzz", "source": "abc"})
    assert rv.status_code == 200
    assert rv.get_json() == {"ok": True, "match": None}


@pytest.mark.e2e
@pytest.mark.parametrize("body", [
    {"source": SOURCE},
    {"query": "x", "source": 12},
    {"query": "x", "source": SOURCE, "line": "3"},
    {"query": "x", "source": SOURCE, "column": True},
])
def test_locate_rejects_bad_payloads(client, body):
    rv = client.post("/api/locate", json=body)
    assert rv.status_code == 400
    data = rv.get_json()
    assert data["ok"] is False and data["error"]


@pytest.mark.e2e
def test_locate_rejects_non_json(client):
    rv = client.post("/api/locate", data="query=x", content_type="text/plain")
    assert rv.status_code == 400


@pytest.mark.e2e
def test_replace_returns_updated_source(client):
    rv = client.post("/api/replace", json={
        "source": SOURCE, "old_text": "quick brown", "new_text": "slow red", "line": 1, "column": 0,
    })
    assert rv.status_code == 200
    data = rv.get_json()
    assert data["source"] == "\\section{Intro}\nThe slow red fox.\nAnother line."
    assert data["plan"]["fallback"] is False


@pytest.mark.e2e
def test_context_endpoint(client):
    rv = client.post("/api/context", json={"source": SOURCE, "line": 2, "context_lines": 1})
    assert rv.status_code == 200
    assert rv.get_json()["context"] == "The quick brown fox.\nAnother line."
