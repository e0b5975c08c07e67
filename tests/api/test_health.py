"""
Test suite for health and service info endpoints.

System role: Verification of liveness HTTP API
"""

from datetime import datetime


def test_health_check(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert datetime.fromisoformat(body["timestamp"]).tzinfo is not None


def test_health_check_db_ok(client, mock_persistence) -> None:
    mock_persistence.check_health.return_value = True

    response = client.get("/health/db")

    assert response.json() == {"status": "ok", "database": True}


def test_health_check_db_degraded(client, mock_persistence) -> None:
    mock_persistence.check_health.return_value = False

    response = client.get("/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "degraded", "database": False}


def test_service_info(client) -> None:
    response = client.get("/api")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Datagent API"
    assert body["version"] == "1.0.0"
    assert body["endpoints"]["chat"] == "POST /api/chat"


def test_unknown_route_uses_error_body(client) -> None:
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_correlation_id_is_echoed(client) -> None:
    response = client.get("/health", headers={"X-Correlation-ID": "req-42"})

    assert response.headers["X-Correlation-ID"] == "req-42"


def test_correlation_id_generated_when_absent(client) -> None:
    response = client.get("/health")

    assert len(response.headers["X-Correlation-ID"]) == 36
