"""
Plugin exceptions
"""


class PluginError(Exception):
    """Base exception for plugin lifecycle and loading errors"""


class AlreadyInitializedError(PluginError):
    """initialize() called on an already initialized plugin"""

    def __init__(self, plugin_id: str = ""):
        self.plugin_id = plugin_id
        super().__init__("plugin already initialized")


class NotInitializedError(PluginError):
    """Operation requires an initialized plugin"""

    def __init__(self, plugin_id: str = ""):
        self.plugin_id = plugin_id
        super().__init__("plugin not initialized")


class PluginLoadError(PluginError):
    """Plugin module or factory could not be loaded"""
