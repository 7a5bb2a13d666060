"""Configuration management."""
from .config_manager import ConfigManager, get_config, initialize_config
from .settings import RoutingSettings, LoggingSettings, ApplicationSettings

__all__ = [
    'ConfigManager', 'get_config', 'initialize_config',
    'RoutingSettings', 'LoggingSettings', 'ApplicationSettings'
]
