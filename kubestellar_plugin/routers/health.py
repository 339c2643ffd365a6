"""
Health check API (dev host)
"""
from fastapi import APIRouter, HTTPException, Request

from ..core.exceptions import NotInitializedError
from ..core.loader import PluginRegistry

router = APIRouter(tags=["health"])


def _registry(request: Request) -> PluginRegistry:
    return request.app.state.registry


def _describe(plugin) -> dict:
    meta = plugin.metadata()
    try:
        plugin.health()
        health = {"status": "healthy"}
    except NotInitializedError as e:
        health = {"status": "unhealthy", "error": str(e)}
    return {
        "id": meta.id,
        "name": meta.name,
        "version": meta.version,
        "endpoints": [endpoint.model_dump(mode="json") for endpoint in meta.endpoints],
        "health": health,
    }


@router.get("/api/health")
async def health_check():
    """API 헬스체크"""
    return {"status": "healthy", "service": "kubestellar-plugin-host"}


@router.get("/api/plugins")
async def list_plugins(request: Request):
    """로드된 플러그인 목록"""
    plugins = [_describe(p) for p in _registry(request).list()]
    return {"plugins": plugins, "total": len(plugins)}


@router.get("/api/plugins/{plugin_id}")
async def get_plugin(plugin_id: str, request: Request):
    """플러그인 상세 (메타데이터 + 헬스)"""
    plugin = _registry(request).get(plugin_id)
    if plugin is None:
        raise HTTPException(status_code=404, detail=f"Plugin {plugin_id} not found")
    return _describe(plugin)
