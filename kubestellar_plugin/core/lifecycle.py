"""
Plugin lifecycle contract

호스트가 플러그인에 기대하는 인터페이스와 공통 구현:
- initialize: 초기화 (중복 호출 시 AlreadyInitializedError)
- metadata: 정적 메타데이터 반환
- handlers: HandlerName -> 핸들러 매핑
- health: 헬스체크 (초기화 전이면 NotInitializedError)
- cleanup: 정리 (여러 번 호출 가능)
"""
import logging
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Protocol, runtime_checkable

from fastapi import Request
from fastapi.responses import JSONResponse

from ..models.plugin import HandlerName, PluginMetadata
from ..utils.rwlock import ReadWriteLock
from .exceptions import AlreadyInitializedError, NotInitializedError

logger = logging.getLogger(__name__)

Handler = Callable[[Request], Awaitable[JSONResponse]]


@runtime_checkable
class KubestellarPlugin(Protocol):
    """호스트 계약 (host contract)"""

    def initialize(self, config: Optional[Mapping[str, Any]] = None) -> None: ...

    def metadata(self) -> PluginMetadata: ...

    def handlers(self) -> Dict[HandlerName, Handler]: ...

    def health(self) -> None: ...

    def cleanup(self) -> None: ...


class BasePlugin:
    """초기화 플래그와 읽기/쓰기 락을 가진 플러그인 기본 구현

    서브클래스는 METADATA와 handlers()를 정의한다.
    """

    METADATA: PluginMetadata

    def __init__(self):
        self._lock = ReadWriteLock()
        self._initialized = False
        self._config: Mapping[str, Any] = MappingProxyType({})

    @property
    def plugin_id(self) -> str:
        return self.METADATA.id

    @property
    def is_initialized(self) -> bool:
        with self._lock.read_locked():
            return self._initialized

    @property
    def config(self) -> Mapping[str, Any]:
        """initialize()에 전달된 설정 (읽기 전용)"""
        with self._lock.read_locked():
            return self._config

    def initialize(self, config: Optional[Mapping[str, Any]] = None) -> None:
        with self._lock.write_locked():
            if self._initialized:
                raise AlreadyInitializedError(self.plugin_id)
            self._config = MappingProxyType(dict(config or {}))
            self._initialized = True
        logger.info(f"{self.METADATA.name} initialized successfully")

    def metadata(self) -> PluginMetadata:
        return self.METADATA.model_copy(deep=True)

    def handlers(self) -> Dict[HandlerName, Handler]:
        raise NotImplementedError

    def health(self) -> None:
        with self._lock.read_locked():
            if not self._initialized:
                raise NotInitializedError(self.plugin_id)

    def not_initialized_response(self) -> Optional[JSONResponse]:
        """초기화 전이면 503 응답, 초기화되었으면 None

        async 핸들러에서 이벤트 루프 스레드로 호출된다. read lock은 writer가
        플래그만 바꾸는 짧은 구간 동안만 대기하며 I/O를 기다리지 않는다.
        """
        if self.is_initialized:
            return None
        return JSONResponse(
            status_code=503,
            content={"error": "plugin not initialized", "plugin": self.plugin_id},
        )

    def cleanup(self) -> None:
        with self._lock.write_locked():
            self._initialized = False
            self._config = MappingProxyType({})
        logger.info(f"{self.METADATA.name} cleaned up")

    def __repr__(self):
        return f"<{type(self).__name__} id={self.plugin_id!r} initialized={self._initialized}>"
