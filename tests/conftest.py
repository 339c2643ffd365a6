"""
Pytest configuration and fixtures
"""
import os
import sys
import pytest
from typing import Generator, AsyncGenerator

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport

from kubestellar_plugin.core.loader import build_router
from kubestellar_plugin.plugins.cluster import new_plugin as new_cluster_plugin
from kubestellar_plugin.plugins.sample import new_plugin as new_sample_plugin


# ============================================
# App Fixtures
# ============================================

@pytest.fixture
def app():
    """Create dev host app with both bundled plugins"""
    from kubestellar_plugin.main import create_app
    return create_app([
        "kubestellar_plugin.plugins.cluster",
        "kubestellar_plugin.plugins.sample",
    ])


@pytest.fixture
def client(app) -> Generator:
    """Synchronous test client (runs lifespan: plugins initialized)"""
    with TestClient(app) as c:
        yield c


@pytest.fixture
async def async_client(app) -> AsyncGenerator:
    """Asynchronous test client (no lifespan: plugins stay uninitialized)"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


# ============================================
# Plugin Fixtures
# ============================================

@pytest.fixture
def cluster_plugin():
    """Fresh, uninitialized cluster plugin"""
    plugin = new_cluster_plugin()
    yield plugin
    plugin.cleanup()


@pytest.fixture
def sample_plugin():
    """Fresh, uninitialized sample plugin"""
    plugin = new_sample_plugin()
    yield plugin
    plugin.cleanup()


def make_plugin_client(plugin) -> TestClient:
    """플러그인 하나만 마운트한 테스트 클라이언트"""
    test_app = FastAPI()
    test_app.include_router(build_router(plugin))
    return TestClient(test_app)


@pytest.fixture
def cluster_client(cluster_plugin) -> TestClient:
    """Client for an initialized cluster plugin mounted at /"""
    cluster_plugin.initialize({})
    return make_plugin_client(cluster_plugin)


@pytest.fixture
def sample_client(sample_plugin) -> TestClient:
    """Client for an initialized sample plugin mounted at /"""
    sample_plugin.initialize({})
    return make_plugin_client(sample_plugin)


@pytest.fixture
def uninitialized_cluster_client(cluster_plugin) -> TestClient:
    """Client for a cluster plugin that was never initialized"""
    return make_plugin_client(cluster_plugin)
