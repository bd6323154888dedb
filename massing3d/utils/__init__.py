"""
Utilities module for massing3d.
Contains logging and error handling helpers.
"""

from .logger import setup_logger, log_condition_summary, log_config
from .error_handling import (
    ConfigError,
    ErrorCategory,
    ErrorContext,
    ErrorHandler,
    ErrorReport,
    ErrorSeverity,
    error_handler,
    safe_execute
)

__all__ = [
    'setup_logger',
    'log_condition_summary',
    'log_config',
    'ConfigError',
    'ErrorCategory',
    'ErrorContext',
    'ErrorHandler',
    'ErrorReport',
    'ErrorSeverity',
    'error_handler',
    'safe_execute'
]
