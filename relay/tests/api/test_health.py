import pytest


@pytest.mark.asyncio
class TestHealthEndpoint:
    async def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "Brevo Email Proxy"}

    async def test_health_without_api_key(self, unconfigured_client):
        """The health check does not depend on the Brevo API key."""

        response = unconfigured_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"
