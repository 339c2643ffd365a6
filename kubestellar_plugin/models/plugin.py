"""
플러그인 메타데이터 모델

호스트(KubeStellar 컨트롤 플레인)가 기대하는 구조:
- PluginMetadata: 플러그인 정보
- EndpointConfig: 선언된 엔드포인트 (path, method, handler)
- HandlerName: 핸들러 디스패치 테이블 키
"""
from enum import Enum
from typing import Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field


class HandlerName(str, Enum):
    """핸들러 이름 (디스패치 테이블 키)"""
    GET_CLUSTER_STATUS = "GetClusterStatusHandler"
    ONBOARD_CLUSTER = "OnboardClusterHandler"
    DETACH_CLUSTER = "DetachClusterHandler"
    HEALTH = "HealthHandler"
    INFO = "InfoHandler"


class HttpMethod(str, Enum):
    """HTTP 메서드"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


class EndpointConfig(BaseModel):
    """플러그인 엔드포인트 설정 (선언용, 라우팅에 강제되지 않음)"""
    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="엔드포인트 경로 (e.g., /onboard)")
    method: HttpMethod = Field(..., description="HTTP 메서드")
    handler: HandlerName = Field(..., description="핸들러 이름")


class PluginMetadata(BaseModel):
    """플러그인 메타데이터"""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    version: str
    description: str = ""
    author: str = ""
    endpoints: Tuple[EndpointConfig, ...] = ()
    dependencies: Tuple[str, ...] = ()
    permissions: Tuple[str, ...] = ()
    compatibility: Dict[str, str] = Field(default_factory=dict)

    def handler_names(self) -> List[HandlerName]:
        """선언된 핸들러 이름 목록"""
        return [endpoint.handler for endpoint in self.endpoints]
