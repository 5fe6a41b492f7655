"""
Configuration module for the TradieStop client.
"""
from .logging_config import LoggingConfig, configure_logging, reset_logging
from .settings import TradieStopConfig, get_config, load_config, reload_config

__all__ = [
    "TradieStopConfig",
    "get_config",
    "load_config",
    "reload_config",
    "LoggingConfig",
    "configure_logging",
    "reset_logging",
]
