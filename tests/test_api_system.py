from fastapi import status


def test_root_health(client):
    response = client.get("/health")
    assert response.json()["status"] == "healthy"


def test_system_health_checks_database(client):
    response = client.get("/api/system/health")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["data"]["status"] == "healthy"


def test_ai_health_reports_unconfigured_providers(client):
    data = client.get("/api/ai/health").json()["data"]
    assert data["sealion"]["configured"] is False
    assert data["openai"]["available"] is False
    assert data["openai"]["health"]["healthy"] is False


def test_reset_circuit_breakers_is_admin_only(client, user_headers, admin_headers):
    response = client.post("/api/ai/reset-circuit-breakers", headers=user_headers)
    assert response.status_code == status.HTTP_403_FORBIDDEN

    response = client.post("/api/ai/reset-circuit-breakers", headers=admin_headers)
    assert response.status_code == status.HTTP_200_OK


def test_metrics_are_exposed(client):
    response = client.get("/metrics/")
    assert response.status_code == status.HTTP_200_OK
