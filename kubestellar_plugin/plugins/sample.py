"""
KubeStellar 샘플 플러그인

헬스체크와 플러그인 정보만 노출하는 최소 구성
"""
import logging
from typing import Dict

from fastapi import Request
from fastapi.responses import JSONResponse

from ..core.exceptions import NotInitializedError
from ..core.lifecycle import BasePlugin, Handler
from ..models.plugin import EndpointConfig, HandlerName, HttpMethod, PluginMetadata
from ..utils.helpers import now_rfc3339

logger = logging.getLogger(__name__)

METADATA = PluginMetadata(
    id="kubestellar-sample-plugin",
    name="KubeStellar Sample Plugin",
    version="1.0.0",
    description="Sample plugin exposing health and info endpoints",
    author="CNCF LFX Mentee",
    endpoints=[
        EndpointConfig(path="/health", method=HttpMethod.GET, handler=HandlerName.HEALTH),
        EndpointConfig(path="/info", method=HttpMethod.GET, handler=HandlerName.INFO),
    ],
    permissions=["cluster.read"],
)


class SamplePlugin(BasePlugin):
    METADATA = METADATA

    def handlers(self) -> Dict[HandlerName, Handler]:
        return {
            HandlerName.HEALTH: self.health_handler,
            HandlerName.INFO: self.info_handler,
        }

    async def health_handler(self, request: Request) -> JSONResponse:
        try:
            self.health()
        except NotInitializedError as e:
            return JSONResponse(
                status_code=503,
                content={"status": "unhealthy", "error": str(e), "timestamp": now_rfc3339()},
            )
        return JSONResponse(content={
            "status": "healthy",
            "plugin": self.plugin_id,
            "timestamp": now_rfc3339(),
        })

    async def info_handler(self, request: Request) -> JSONResponse:
        """플러그인 메타데이터 + 초기화 상태"""
        return JSONResponse(content={
            "metadata": self.metadata().model_dump(mode="json"),
            "initialized": self.is_initialized,
            "status": "ok",
            "timestamp": now_rfc3339(),
        })


def new_plugin() -> SamplePlugin:
    logger.info("Creating new SamplePlugin instance")
    return SamplePlugin()
