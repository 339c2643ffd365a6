"""
Application configuration settings
"""
import os
from typing import List


def _split(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """Application settings"""

    # App
    APP_TITLE: str = os.getenv("APP_TITLE", "KubeStellar Plugin Dev Host")
    APP_VERSION: str = os.getenv("APP_VERSION", "1.0.0")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))

    # CORS
    CORS_ORIGINS: List[str] = _split(os.getenv("CORS_ORIGINS", "*"))
    CORS_CREDENTIALS: bool = True
    CORS_METHODS: List[str] = ["*"]
    CORS_HEADERS: List[str] = ["*"]

    # Plugins
    PLUGIN_MODULES: List[str] = _split(os.getenv(
        "PLUGIN_MODULES",
        "kubestellar_plugin.plugins.cluster,kubestellar_plugin.plugins.sample",
    ))
    PLUGIN_PREFIX: str = os.getenv("PLUGIN_PREFIX", "/api/plugins")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


settings = Settings()
