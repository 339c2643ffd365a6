"""
KubeStellar 클러스터 관리 플러그인 (테스트용 mock)

엔드포인트:
- GET  /status  - 클러스터 상태 목록
- POST /onboard - 클러스터 온보딩 요청
- POST /detach  - 클러스터 분리 요청

실제 클러스터에 접속하거나 kubectl/clusteradm을 실행하지 않는다.
"""
import logging
from datetime import timedelta
from typing import Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from ..core.lifecycle import BasePlugin, Handler
from ..models.cluster import (
    ClusterInfo, ClusterOperationResponse, ClusterRequest, ClusterStatus,
    ClusterStatusResponse, ClusterSummary, ErrorResponse
)
from ..models.plugin import EndpointConfig, HandlerName, HttpMethod, PluginMetadata
from ..utils.helpers import now_rfc3339, read_json_object

logger = logging.getLogger(__name__)

METADATA = PluginMetadata(
    id="kubestellar-cluster-plugin",
    name="KubeStellar Cluster Management",
    version="1.0.0",
    description="Plugin for cluster onboarding and detachment operations",
    author="CNCF LFX Mentee",
    endpoints=[
        EndpointConfig(path="/onboard", method=HttpMethod.POST, handler=HandlerName.ONBOARD_CLUSTER),
        EndpointConfig(path="/detach", method=HttpMethod.POST, handler=HandlerName.DETACH_CLUSTER),
        EndpointConfig(path="/status", method=HttpMethod.GET, handler=HandlerName.GET_CLUSTER_STATUS),
    ],
    dependencies=["kubectl", "clusteradm"],
    permissions=["cluster.read", "cluster.write"],
    compatibility={
        "python": ">=3.9",
        "kubestellar": ">=0.21.0",
    },
)


def _error(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


class ClusterPlugin(BasePlugin):
    """클러스터 온보딩/분리 mock 플러그인"""

    METADATA = METADATA

    def handlers(self) -> Dict[HandlerName, Handler]:
        return {
            HandlerName.GET_CLUSTER_STATUS: self.get_cluster_status,
            HandlerName.ONBOARD_CLUSTER: self.onboard_cluster,
            HandlerName.DETACH_CLUSTER: self.detach_cluster,
        }

    # ============================================
    # 핸들러
    # ============================================

    async def get_cluster_status(self, request: Request) -> JSONResponse:
        """클러스터 상태 조회 (mock 데이터)"""
        not_ready = self.not_initialized_response()
        if not_ready is not None:
            return not_ready

        clusters = [
            ClusterInfo(
                clusterName="test-cluster-1",
                status=ClusterStatus.READY,
                message="Cluster is healthy and ready",
                lastUpdated=now_rfc3339(),
            ),
            ClusterInfo(
                clusterName="test-cluster-2",
                status=ClusterStatus.PENDING,
                message="Cluster onboarding in progress",
                lastUpdated=now_rfc3339(timedelta(minutes=-5)),
            ),
        ]
        response = ClusterStatusResponse(
            clusters=clusters,
            summary=ClusterSummary.from_clusters(clusters),
            timestamp=now_rfc3339(),
        )
        return JSONResponse(content=response.model_dump(mode="json"))

    async def onboard_cluster(self, request: Request) -> JSONResponse:
        """클러스터 온보딩 요청"""
        return await self._cluster_operation(request, ClusterStatus.PENDING, "onboarding")

    async def detach_cluster(self, request: Request) -> JSONResponse:
        """클러스터 분리 요청"""
        return await self._cluster_operation(request, ClusterStatus.DETACHING, "detachment")

    async def _cluster_operation(self, request: Request, status: ClusterStatus, operation: str) -> JSONResponse:
        not_ready = self.not_initialized_response()
        if not_ready is not None:
            return not_ready

        body, parse_error = await read_json_object(request)
        if parse_error is not None:
            return _error(400, "Invalid request format", parse_error)

        try:
            cluster = ClusterRequest.model_validate(body)
        except ValidationError:
            return _error(400, "clusterName is required")

        logger.info(f"Mock {operation} for cluster: {cluster.clusterName}")

        response = ClusterOperationResponse(
            message=f"Cluster '{cluster.clusterName}' {operation} started successfully",
            clusterName=cluster.clusterName,
            status=status,
            timestamp=now_rfc3339(),
        )
        return JSONResponse(content=response.model_dump(mode="json"))


def new_plugin() -> ClusterPlugin:
    """플러그인 팩토리 (호스트가 심볼 이름으로 조회)"""
    logger.info("Creating new ClusterPlugin instance")
    return ClusterPlugin()
