# Pydantic models
from .plugin import HandlerName, HttpMethod, EndpointConfig, PluginMetadata
from .cluster import (
    ClusterStatus, ClusterRequest, ClusterInfo, ClusterSummary,
    ClusterStatusResponse, ClusterOperationResponse, ErrorResponse
)

__all__ = [
    # Plugin
    'HandlerName', 'HttpMethod', 'EndpointConfig', 'PluginMetadata',
    # Cluster
    'ClusterStatus', 'ClusterRequest', 'ClusterInfo', 'ClusterSummary',
    'ClusterStatusResponse', 'ClusterOperationResponse', 'ErrorResponse',
]
