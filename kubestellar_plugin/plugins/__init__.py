"""
번들 플러그인 변형

- cluster: 클러스터 상태/온보딩/분리 (mock)
- sample : 헬스체크/정보
각 모듈은 호스트가 조회하는 팩토리 new_plugin()을 노출한다.
"""
from .cluster import ClusterPlugin
from .sample import SamplePlugin

__all__ = [
    "ClusterPlugin",
    "SamplePlugin",
]
