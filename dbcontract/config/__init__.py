"""Configuration loading and validation package."""

from .loader import load_client_config
from .models import ClientConfig, LoggingConfig, StoreConfig

__all__ = [
    "ClientConfig",
    "LoggingConfig",
    "StoreConfig",
    "load_client_config",
]
