"""
Config Package - Black Box Interface

Purpose: Application configuration management
Interface: ConfigProvider protocol, EnvConfigProvider
Hidden: Config sources, environment parsing

Can be replaced with different config systems without affecting other modules.
"""

from .provider import APIConfig, ConfigProvider, EnvConfigProvider, StoreConfig, TokenConfig

__all__ = ["APIConfig", "ConfigProvider", "EnvConfigProvider", "StoreConfig", "TokenConfig"]
