"""
Structured error reporting for massing3d.

Geometry functions signal degenerate input by returning None; this module
covers the layers above them (configuration loading, per-condition
processing in the pipeline), where a failure should be logged with context
and counted, then either re-raised or replaced by a default.
"""

import functools
import json
import logging
import time
import traceback
import uuid
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

MAX_RECENT_ERRORS = 100


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Error categories."""
    INPUT_VALIDATION = "input_validation"
    GEOMETRY_PROCESSING = "geometry_processing"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class ConfigError(ValueError):
    """Invalid or unreadable configuration."""


@dataclass
class ErrorContext:
    """Context information for errors."""
    operation: str
    condition: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ErrorReport:
    """Structured error report."""
    error_id: str
    timestamp: float
    severity: ErrorSeverity
    category: ErrorCategory
    message: str
    exception_type: str
    traceback: str
    context: ErrorContext
    resolution_suggestions: List[str]

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['severity'] = self.severity.value
        data['category'] = self.category.value
        return data


class ErrorHandler:
    """Handles errors and generates structured reports."""

    def __init__(self, log_file: Optional[str] = None):
        """
        Initialize error handler.

        Args:
            log_file: Optional file that receives error reports in addition
                to the module logger's handlers
        """
        self.log_file = log_file
        self._file_handler = None
        if log_file:
            self._file_handler = logging.FileHandler(log_file)
            self._file_handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            logger.addHandler(self._file_handler)

        self.error_stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            'total_errors': 0,
            'errors_by_category': {},
            'errors_by_severity': {},
            'recent_errors': []
        }

    def handle_error(self,
                     exception: Exception,
                     context: ErrorContext,
                     severity: ErrorSeverity = ErrorSeverity.MEDIUM,
                     category: ErrorCategory = ErrorCategory.UNKNOWN,
                     resolution_suggestions: Optional[List[str]] = None) -> ErrorReport:
        """
        Handle an error and generate a structured report.

        Args:
            exception: The exception that occurred
            context: Error context
            severity: Error severity
            category: Error category
            resolution_suggestions: Suggested resolutions

        Returns:
            Error report
        """
        error_report = ErrorReport(
            error_id=str(uuid.uuid4()),
            timestamp=time.time(),
            severity=severity,
            category=category,
            message=str(exception),
            exception_type=type(exception).__name__,
            traceback=''.join(traceback.format_exception(
                type(exception), exception, exception.__traceback__
            )),
            context=context,
            resolution_suggestions=resolution_suggestions or []
        )

        self._log_error(error_report)
        self._update_error_stats(error_report)

        return error_report

    def _log_error(self, error_report: ErrorReport):
        log_message = (
            f"Error {error_report.error_id} in {error_report.context.operation}"
            f" [{error_report.category.value}]: "
            f"{error_report.exception_type}: {error_report.message}"
        )
        if error_report.context.condition:
            log_message += f" (condition: {error_report.context.condition})"
        if error_report.context.metadata:
            log_message += f"\nContext: {json.dumps(error_report.context.metadata, default=str)}"
        if error_report.resolution_suggestions:
            log_message += f"\nResolution Suggestions: {error_report.resolution_suggestions}"

        if error_report.severity == ErrorSeverity.CRITICAL:
            logger.critical(log_message)
        elif error_report.severity == ErrorSeverity.HIGH:
            logger.error(log_message)
        elif error_report.severity == ErrorSeverity.MEDIUM:
            logger.warning(log_message)
        else:
            logger.info(log_message)

        logger.debug(error_report.traceback)

    def _update_error_stats(self, error_report: ErrorReport):
        self.error_stats['total_errors'] += 1

        by_category = self.error_stats['errors_by_category']
        category = error_report.category.value
        by_category[category] = by_category.get(category, 0) + 1

        by_severity = self.error_stats['errors_by_severity']
        severity = error_report.severity.value
        by_severity[severity] = by_severity.get(severity, 0) + 1

        recent = self.error_stats['recent_errors']
        recent.append({
            'error_id': error_report.error_id,
            'timestamp': error_report.timestamp,
            'severity': severity,
            'category': category,
            'operation': error_report.context.operation
        })
        if len(recent) > MAX_RECENT_ERRORS:
            self.error_stats['recent_errors'] = recent[-MAX_RECENT_ERRORS:]

    def get_error_stats(self) -> Dict[str, Any]:
        """Get error statistics."""
        return self.error_stats.copy()

    def get_recent_errors(self, count: int = 10) -> List[Dict[str, Any]]:
        return self.error_stats['recent_errors'][-count:]

    def clear_error_stats(self):
        self.error_stats = self._empty_stats()

    def close(self):
        """Detach the log file handler, if any."""
        if self._file_handler is not None:
            logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None


def error_handler(severity: ErrorSeverity = ErrorSeverity.MEDIUM,
                  category: ErrorCategory = ErrorCategory.UNKNOWN,
                  resolution_suggestions: Optional[List[str]] = None):
    """
    Decorator that reports exceptions through the global handler and re-raises.

    Args:
        severity: Error severity
        category: Error category
        resolution_suggestions: Suggested resolutions
    """
    def decorator(func: Callable):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                context = ErrorContext(
                    operation=func.__name__,
                    metadata={'args': str(args), 'kwargs': str(kwargs)}
                )
                global_error_handler.handle_error(
                    e, context, severity, category, resolution_suggestions
                )
                raise
        return wrapper
    return decorator


def safe_execute(func: Callable,
                 default_return: Any = None,
                 context: Optional[ErrorContext] = None,
                 handler: Optional[ErrorHandler] = None) -> Any:
    """
    Execute func, reporting any exception and returning default_return instead.

    Args:
        func: Zero-argument callable
        default_return: Value returned on error
        context: Error context for the report
        handler: Error handler, the global one by default
    """
    try:
        return func()
    except Exception as e:
        (handler or global_error_handler).handle_error(
            e,
            context or ErrorContext(operation=getattr(func, '__name__', 'anonymous')),
            ErrorSeverity.LOW,
            ErrorCategory.UNKNOWN
        )
        return default_return


global_error_handler = ErrorHandler()


def get_error_stats() -> Dict[str, Any]:
    return global_error_handler.get_error_stats()
