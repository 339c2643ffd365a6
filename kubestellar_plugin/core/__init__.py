# Core module - configuration, lifecycle contract, loader
from .config import settings
from .exceptions import (
    PluginError,
    AlreadyInitializedError,
    NotInitializedError,
    PluginLoadError,
)
from .lifecycle import KubestellarPlugin, BasePlugin, Handler
from .loader import FACTORY_SYMBOL, load_plugin, build_router, PluginRegistry

__all__ = [
    'settings',
    'PluginError', 'AlreadyInitializedError', 'NotInitializedError', 'PluginLoadError',
    'KubestellarPlugin', 'BasePlugin', 'Handler',
    'FACTORY_SYMBOL', 'load_plugin', 'build_router', 'PluginRegistry',
]
