"""
Integration tests for the dev host
"""
import pytest

from kubestellar_plugin.main import create_app
from fastapi.testclient import TestClient


class TestHostHealthAPI:
    """Tests for /api/health and /api/plugins"""

    def test_health_check(self, client):
        """Test basic health check"""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "service" in data

    def test_list_plugins(self, client):
        """Test both bundled plugins are loaded and healthy"""
        response = client.get("/api/plugins")
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        ids = {p["id"] for p in data["plugins"]}
        assert ids == {"kubestellar-cluster-plugin", "kubestellar-sample-plugin"}
        assert all(p["health"]["status"] == "healthy" for p in data["plugins"])

    def test_get_plugin(self, client):
        """Test plugin detail"""
        response = client.get("/api/plugins/kubestellar-cluster-plugin")
        assert response.status_code == 200
        data = response.json()
        assert data["version"] == "1.0.0"
        assert len(data["endpoints"]) == 3

    def test_get_unknown_plugin(self, client):
        """Test unknown plugin id"""
        response = client.get("/api/plugins/unknown")
        assert response.status_code == 404


class TestHostRouting:
    """Tests for handlers mounted by the dev host"""

    def test_onboard_through_host(self, client):
        """Test onboarding through the mounted prefix"""
        response = client.post(
            "/api/plugins/kubestellar-cluster-plugin/onboard",
            json={"clusterName": "test-cluster-1"},
        )
        assert response.status_code == 200
        assert response.json()["status"] == "pending"

    def test_sample_health_through_host(self, client):
        """Test sample plugin health through the mounted prefix"""
        response = client.get("/api/plugins/kubestellar-sample-plugin/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestHostLifecycle:
    """Tests for plugin initialize/cleanup around the app lifespan"""

    def test_plugins_cleaned_up_on_shutdown(self, app):
        """Test plugins are initialized on startup and cleaned up on shutdown"""
        registry = app.state.registry
        plugins = registry.list()
        with TestClient(app):
            assert all(p.is_initialized for p in plugins)
        assert not any(p.is_initialized for p in plugins)
        assert len(registry) == 0

    def test_bad_module_skipped(self):
        """Test a module that fails to load does not break the host"""
        app = create_app([
            "kubestellar_plugin.plugins.does_not_exist",
            "kubestellar_plugin.plugins.sample",
        ])
        with TestClient(app) as c:
            data = c.get("/api/plugins").json()
        assert data["total"] == 1
        assert data["plugins"][0]["id"] == "kubestellar-sample-plugin"


@pytest.mark.asyncio
class TestHostAPIAsync:
    """Async tests for the dev host"""

    async def test_health_check_async(self, async_client):
        """Test health check with async client"""
        response = await async_client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    async def test_plugins_unhealthy_without_lifespan(self, async_client):
        """Test plugins report not initialized when the lifespan did not run"""
        data = (await async_client.get("/api/plugins")).json()
        assert all(p["health"]["status"] == "unhealthy" for p in data["plugins"])
