"""
Plugin loader

호스트 측 계약:
- 모듈에서 고정 심볼(new_plugin)로 팩토리를 찾아 인스턴스 생성
- 메타데이터에 선언된 엔드포인트를 handlers() 테이블로 바인딩해 APIRouter 구성
- 로드된 플러그인 레지스트리
"""
import importlib
import logging
import threading
from typing import Dict, List, Optional

from fastapi import APIRouter

from .exceptions import PluginLoadError
from .lifecycle import KubestellarPlugin

logger = logging.getLogger(__name__)

FACTORY_SYMBOL = "new_plugin"


def load_plugin(module_path: str, symbol: str = FACTORY_SYMBOL) -> KubestellarPlugin:
    """모듈 경로에서 팩토리 심볼을 찾아 플러그인 인스턴스 생성

    Args:
        module_path: import 경로 (e.g., kubestellar_plugin.plugins.cluster)
        symbol: 팩토리 함수 이름

    Raises:
        PluginLoadError: 모듈/심볼이 없거나 계약을 만족하지 않는 경우
    """
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise PluginLoadError(f"Failed to import plugin module {module_path}: {e}") from e

    factory = getattr(module, symbol, None)
    if factory is None:
        raise PluginLoadError(f"Plugin module {module_path} has no symbol {symbol!r}")
    if not callable(factory):
        raise PluginLoadError(f"Plugin entrypoint {module_path}.{symbol} is not callable")

    plugin = factory()
    if not isinstance(plugin, KubestellarPlugin):
        raise PluginLoadError(
            f"{module_path}.{symbol}() returned {type(plugin).__name__}, "
            f"which does not implement the plugin contract"
        )

    logger.info(f"Loaded plugin {plugin.metadata().id} from {module_path}")
    return plugin


def build_router(plugin: KubestellarPlugin, prefix: str = "") -> APIRouter:
    """선언된 엔드포인트를 핸들러에 바인딩한 라우터 생성

    handlers()에 없는 핸들러를 선언한 엔드포인트는 경고 후 건너뛴다.
    """
    meta = plugin.metadata()
    table = plugin.handlers()
    router = APIRouter(prefix=prefix, tags=[meta.id])

    for endpoint in meta.endpoints:
        handler = table.get(endpoint.handler)
        if handler is None:
            logger.warning(
                f"Plugin {meta.id}: endpoint {endpoint.method.value} {endpoint.path} "
                f"declares handler {endpoint.handler.value} which is not provided, skipping"
            )
            continue
        router.add_api_route(
            endpoint.path,
            handler,
            methods=[endpoint.method.value],
            name=f"{meta.id}:{endpoint.handler.value}",
        )

    return router


class PluginRegistry:
    """로드된 플러그인 레지스트리 (id -> 인스턴스)"""

    def __init__(self):
        self._plugins: Dict[str, KubestellarPlugin] = {}
        self._lock = threading.Lock()

    def register(self, plugin: KubestellarPlugin) -> str:
        plugin_id = plugin.metadata().id
        with self._lock:
            if plugin_id in self._plugins:
                raise PluginLoadError(f"Plugin {plugin_id} is already registered")
            self._plugins[plugin_id] = plugin
        return plugin_id

    def get(self, plugin_id: str) -> Optional[KubestellarPlugin]:
        with self._lock:
            return self._plugins.get(plugin_id)

    def list(self) -> List[KubestellarPlugin]:
        with self._lock:
            return list(self._plugins.values())

    def unload(self, plugin_id: str) -> bool:
        """cleanup() 후 레지스트리에서 제거"""
        with self._lock:
            plugin = self._plugins.pop(plugin_id, None)
        if plugin is None:
            return False
        plugin.cleanup()
        logger.info(f"Unloaded plugin {plugin_id}")
        return True

    def unload_all(self):
        for plugin_id in [p.metadata().id for p in self.list()]:
            self.unload(plugin_id)

    def __len__(self):
        with self._lock:
            return len(self._plugins)

    def __contains__(self, plugin_id):
        with self._lock:
            return plugin_id in self._plugins
