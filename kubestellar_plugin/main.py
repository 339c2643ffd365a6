"""
KubeStellar 플러그인 개발용 호스트

실제 호스트(KubeStellar 컨트롤 플레인)를 흉내내는 로컬 FastAPI 앱:
- PLUGIN_MODULES의 모듈에서 new_plugin()으로 플러그인 로드
- 메타데이터에 선언된 엔드포인트를 {PLUGIN_PREFIX}/{plugin_id} 아래에 마운트
- 시작 시 initialize(), 종료 시 cleanup()

API 구조:
- /api/health                 - 호스트 헬스체크
- /api/plugins                - 로드된 플러그인 목록
- /api/plugins/{id}           - 플러그인 상세
- /api/plugins/{id}/<path>    - 플러그인 핸들러

개발 서버: kubestellar-plugin-host (또는 uvicorn --factory kubestellar_plugin.main:create_app --reload)
"""
import logging
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.exceptions import AlreadyInitializedError, PluginLoadError
from .core.loader import PluginRegistry, build_router, load_plugin
from .routers import health_router

logger = logging.getLogger(__name__)


def create_app(plugin_modules: Optional[List[str]] = None) -> FastAPI:
    """플러그인을 로드해 마운트한 호스트 앱 생성"""
    registry = PluginRegistry()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        for plugin in registry.list():
            try:
                plugin.initialize({"prefix": settings.PLUGIN_PREFIX})
            except AlreadyInitializedError:
                logger.warning(f"Plugin {plugin.metadata().id} was already initialized")
        yield
        registry.unload_all()

    app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION, lifespan=lifespan)
    app.state.registry = registry

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_CREDENTIALS,
        allow_methods=settings.CORS_METHODS,
        allow_headers=settings.CORS_HEADERS,
    )

    # ============================================
    # 라우터 등록
    # ============================================
    app.include_router(health_router)

    modules = settings.PLUGIN_MODULES if plugin_modules is None else plugin_modules
    for module_path in modules:
        try:
            plugin = load_plugin(module_path)
            plugin_id = registry.register(plugin)
        except PluginLoadError as e:
            logger.error(f"Skipping plugin {module_path}: {e}")
            continue
        app.include_router(build_router(plugin, prefix=f"{settings.PLUGIN_PREFIX}/{plugin_id}"))

    return app


def run():
    """개발 호스트 실행 (kubestellar-plugin-host)"""
    import uvicorn
    logging.basicConfig(level=settings.LOG_LEVEL, format=settings.LOG_FORMAT)
    uvicorn.run("kubestellar_plugin.main:create_app", factory=True, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    print("This is a KubeStellar plugin, not a standalone executable")
