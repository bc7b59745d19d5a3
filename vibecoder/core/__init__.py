"""
Core module - Configuration shared by every layer.
"""

from .config import (
    AppConfig,
    HuggingFaceConfig,
    OpenAIConfig,
    ProvidersConfig,
    ChainConfig,
    ServerConfig,
    LoggingConfig,
    get_default_config,
    load_config,
)

__all__ = [
    # Config classes
    'AppConfig',
    'HuggingFaceConfig',
    'OpenAIConfig',
    'ProvidersConfig',
    'ChainConfig',
    'ServerConfig',
    'LoggingConfig',
    # Config functions
    'get_default_config',
    'load_config',
]
