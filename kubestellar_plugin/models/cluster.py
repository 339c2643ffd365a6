"""
Cluster related Pydantic models
"""
from enum import Enum
from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ClusterStatus(str, Enum):
    """클러스터 상태"""
    READY = "ready"
    PENDING = "pending"  # 온보딩 진행 중
    FAILED = "failed"
    DETACHING = "detaching"  # 분리 진행 중


class ClusterRequest(BaseModel):
    """클러스터 온보딩/분리 요청"""
    model_config = ConfigDict(extra="allow")

    clusterName: str = Field(..., min_length=1, description="대상 클러스터 이름")

    @field_validator("clusterName")
    @classmethod
    def cluster_name_not_blank(cls, value: str) -> str:
        # 공백만 있는 이름은 거부, 값은 그대로 유지
        if not value.strip():
            raise ValueError("clusterName must not be blank")
        return value


class ClusterInfo(BaseModel):
    """클러스터 정보"""
    clusterName: str
    status: ClusterStatus
    message: str = ""
    lastUpdated: str


class ClusterSummary(BaseModel):
    """상태별 클러스터 수"""
    total: int = 0
    ready: int = 0
    pending: int = 0
    failed: int = 0
    detaching: int = 0

    @classmethod
    def from_clusters(cls, clusters: Iterable[ClusterInfo]) -> "ClusterSummary":
        """클러스터 목록에서 집계 (요약이 개별 상태와 어긋나지 않도록)"""
        counts = {status.value: 0 for status in ClusterStatus}
        total = 0
        for cluster in clusters:
            counts[ClusterStatus(cluster.status).value] += 1
            total += 1
        return cls(total=total, **counts)


class ClusterStatusResponse(BaseModel):
    """클러스터 상태 조회 응답"""
    clusters: List[ClusterInfo]
    summary: ClusterSummary
    timestamp: str


class ClusterOperationResponse(BaseModel):
    """온보딩/분리 요청 응답"""
    message: str
    clusterName: str
    status: ClusterStatus
    timestamp: str


class ErrorResponse(BaseModel):
    """에러 응답"""
    error: str
    details: Optional[str] = None
