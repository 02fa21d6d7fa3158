from swimlanes.db.session import get_db
from swimlanes.main import app


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"api": "ok", "database": "connected"}


def test_health_head(client):
    assert client.head("/api/health").status_code == 200


def test_stats_empty(client):
    res = client.get("/api/system/stats")
    assert res.status_code == 200
    assert res.json() == {"boards": 0, "columns": 0, "cards": 0, "archived_cards": 0}


def test_openapi_document_lists_routes(client):
    res = client.get("/api/system/docs.json")
    assert res.status_code == 200
    paths = res.json()["paths"]
    assert "/api/boards" in paths
    assert "/api/cards/{card_id}/move" in paths
    assert "/api/system/docs.json" not in paths


def test_unknown_route_uses_error_body(client):
    res = client.get("/api/nothing-here")
    assert res.status_code == 404
    assert res.json() == {"error": "Not Found"}


class UnreachableSession:
    async def execute(self, *args, **kwargs):
        raise RuntimeError("unable to open database file")


def test_health_reports_unreachable_database(client):
    async def broken_db():
        yield UnreachableSession()

    app.dependency_overrides[get_db] = broken_db

    res = client.get("/api/health")
    assert res.status_code == 503
    body = res.json()
    assert body["api"] == "ok"
    assert body["database"] == "error: unable to open database file"
