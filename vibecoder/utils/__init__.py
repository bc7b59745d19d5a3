"""
Utilities module - Common helper functions and classes.
"""

from .logger import (
    setup_logging,
    get_logger,
    provider_attempt,
    log_exception,
)
from .text import (
    capitalize_first,
    unique_ordered,
    build_instruction,
)

__all__ = [
    # Logging
    'setup_logging',
    'get_logger',
    'provider_attempt',
    'log_exception',
    # Text
    'capitalize_first',
    'unique_ordered',
    'build_instruction',
]
