"""
KubeStellar cluster management sample plugin
"""
from .core import (
    FACTORY_SYMBOL,
    KubestellarPlugin,
    BasePlugin,
    PluginError,
    AlreadyInitializedError,
    NotInitializedError,
    PluginLoadError,
    load_plugin,
    build_router,
)
from .plugins.cluster import new_plugin

__version__ = "1.0.0"

__all__ = [
    'FACTORY_SYMBOL',
    'KubestellarPlugin', 'BasePlugin',
    'PluginError', 'AlreadyInitializedError', 'NotInitializedError', 'PluginLoadError',
    'load_plugin', 'build_router',
    'new_plugin',
]
