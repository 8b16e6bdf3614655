"""Error bookkeeping for security system components.

Errors are recorded and logged, then re-raised to the caller. Nothing here
retries or recovers: a failed operation leaves persisted state as it was and
the caller decides what to do next.
"""

import functools
import threading
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from typing import Dict, List, Optional, Any

from ..logging_config import get_logger
from .exceptions import InvalidStatusError, UnknownSensorError

logger = get_logger("error_handler")


class ErrorSeverity(Enum):
    """Error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ComponentStatus(Enum):
    """Component status levels."""
    HEALTHY = "healthy"
    DEGRADED = "degraded"
    FAILED = "failed"
    UNKNOWN = "unknown"


@dataclass
class ErrorRecord:
    """Record of an error occurrence."""
    component: str
    error_type: str
    message: str
    severity: ErrorSeverity
    timestamp: datetime = field(default_factory=datetime.now)


class ErrorHandler:
    """Records errors per component and tracks component health."""

    def __init__(self, max_error_history: int = 1000):
        self.max_error_history = max_error_history
        self.error_history: List[ErrorRecord] = []
        self.component_error_counts: Dict[str, int] = {}
        self.component_status: Dict[str, ComponentStatus] = {}
        self._lock = threading.Lock()

    def register_component(self, component_name: str) -> None:
        """Register a component for health tracking."""
        with self._lock:
            self.component_error_counts.setdefault(component_name, 0)
            self.component_status.setdefault(component_name, ComponentStatus.HEALTHY)
        logger.debug(f"Component registered: {component_name}")

    def handle_error(self, component_name: str, error: Exception,
                     severity: ErrorSeverity = ErrorSeverity.MEDIUM) -> ErrorRecord:
        """Record an error from a component and return the record."""
        record = ErrorRecord(
            component=component_name,
            error_type=type(error).__name__,
            message=str(error),
            severity=severity
        )

        with self._lock:
            self.error_history.append(record)
            if len(self.error_history) > self.max_error_history:
                self.error_history = self.error_history[-self.max_error_history:]

            self.component_error_counts[component_name] = \
                self.component_error_counts.get(component_name, 0) + 1

            if severity == ErrorSeverity.CRITICAL:
                self.component_status[component_name] = ComponentStatus.FAILED
            elif severity in (ErrorSeverity.HIGH, ErrorSeverity.MEDIUM):
                self.component_status[component_name] = ComponentStatus.DEGRADED
            else:
                self.component_status.setdefault(component_name, ComponentStatus.HEALTHY)

        if severity in (ErrorSeverity.HIGH, ErrorSeverity.CRITICAL):
            logger.error(f"Error in {component_name}: {error} (Severity: {severity.value})")
        else:
            logger.warning(f"Error in {component_name}: {error} (Severity: {severity.value})")

        return record

    def get_component_health(self) -> Dict[str, ComponentStatus]:
        """Get health status of all known components."""
        with self._lock:
            return dict(self.component_status)

    def reset_error_counts(self, component_name: Optional[str] = None) -> None:
        """Reset error counts for a component or all components."""
        with self._lock:
            components = [component_name] if component_name else list(self.component_error_counts)
            for component in components:
                if component in self.component_error_counts:
                    self.component_error_counts[component] = 0
                    self.component_status[component] = ComponentStatus.HEALTHY

    def clear_error_history(self) -> None:
        with self._lock:
            self.error_history.clear()

    def get_error_summary(self, hours: int = 24) -> Dict[str, Any]:
        """Get summary of errors in the last N hours."""
        cutoff_time = datetime.now() - timedelta(hours=hours)

        with self._lock:
            recent_errors = [e for e in self.error_history if e.timestamp >= cutoff_time]

        component_counts: Dict[str, int] = {}
        severity_counts = {severity.value: 0 for severity in ErrorSeverity}

        for error in recent_errors:
            component_counts[error.component] = component_counts.get(error.component, 0) + 1
            severity_counts[error.severity.value] += 1

        return {
            "total_errors": len(recent_errors),
            "component_counts": component_counts,
            "severity_counts": severity_counts,
            "time_period_hours": hours
        }


# Create global error handler instance
global_error_handler = ErrorHandler()

# Caller mistakes, not component faults
_INPUT_ERRORS = (InvalidStatusError, UnknownSensorError)


def with_error_handling(component_name: str, severity: ErrorSeverity = ErrorSeverity.MEDIUM,
                        error_handler: Optional[ErrorHandler] = None):
    """Decorator that records errors raised by the wrapped call and re-raises them.

    Rejected input is recorded with LOW severity so it does not mark the
    component as degraded.
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as e:
                handler = error_handler or global_error_handler
                effective = ErrorSeverity.LOW if isinstance(e, _INPUT_ERRORS) else severity
                handler.handle_error(component_name, e, effective)
                raise
        return wrapper
    return decorator
