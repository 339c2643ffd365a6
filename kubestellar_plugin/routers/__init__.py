"""
API Routers

- health: 호스트 헬스체크, 로드된 플러그인 조회
"""
from .health import router as health_router

__all__ = [
    'health_router',
]
