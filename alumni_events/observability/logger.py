import os
import math
import time
import json
import logging
from contextlib import contextmanager
from typing import Dict, Any, Optional
from datetime import datetime, timezone

# Import sentry_sdk at module level for testing
try:
    import sentry_sdk
except ImportError:
    sentry_sdk = None

logger = logging.getLogger(__name__)


class TimingContext:
    """Context manager for timing operations."""

    def __init__(self, operation_name: str):
        self.operation_name = operation_name
        self.start_time: Optional[float] = None
        self.duration_ms: Optional[float] = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.start_time is not None:
            self.duration_ms = (time.perf_counter() - self.start_time) * 1000

    def get_duration_ms(self) -> Optional[float]:
        """Get duration in milliseconds."""
        return self.duration_ms


@contextmanager
def timing(operation_name: str):
    """Context manager for timing operations."""
    context = TimingContext(operation_name)
    with context:
        yield context


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def _to_json(entry: Dict[str, Any]) -> str:
    # Non-finite floats are not valid JSON; log them as strings. default=str covers datetimes.
    cleaned = {
        k: str(v) if isinstance(v, float) and not math.isfinite(v) else v
        for k, v in entry.items()
    }
    return json.dumps(cleaned, separators=(',', ':'), default=str)



def log_event(
    action: str,
    operation: str,
    duration_ms: Optional[float] = None,
    **kwargs
) -> None:
    """
    Log a structured engine event as a single JSON line.

    Args:
        action: What happened (e.g., 'suggested', 'checked', 'ranked')
        operation: The engine operation that produced it (e.g., 'suggest_best_time')
        duration_ms: Optional duration in milliseconds
        **kwargs: Additional fields to include in the log (identifiers, result sizes)
    """
    log_entry: Dict[str, Any] = {
        "timestamp": _timestamp(),
        "action": action,
        "operation": operation,
    }

    if duration_ms is not None:
        log_entry["duration_ms"] = round(duration_ms, 2)

    log_entry.update(kwargs)

    logger.info(_to_json(log_entry))


def init_sentry() -> bool:
    """
    Initialize Sentry if enabled and DSN is provided.

    Returns:
        True if Sentry was initialized, False otherwise
    """
    if not os.getenv("OBS_ENABLED", "false").lower() == "true":
        return False

    sentry_dsn = os.getenv("SENTRY_DSN")
    if not sentry_dsn:
        logger.info("Sentry DSN not provided, skipping Sentry initialization")
        return False

    try:
        if sentry_sdk is None:
            raise ImportError("sentry_sdk not available")

        from sentry_sdk.integrations.fastapi import FastApiIntegration
        from sentry_sdk.integrations.logging import LoggingIntegration

        sentry_sdk.init(
            dsn=sentry_dsn,
            integrations=[
                FastApiIntegration(),
                LoggingIntegration(
                    level=logging.INFO,
                    event_level=logging.ERROR
                ),
            ],
            traces_sample_rate=0.1,
            environment=os.getenv("ENVIRONMENT", "development"),
        )

        logger.info("Sentry initialized successfully")
        return True

    except ImportError:
        logger.warning("Sentry SDK not installed, skipping Sentry initialization")
        return False
    except Exception as e:
        logger.error(f"Failed to initialize Sentry: {e}")
        return False


def log_error(error: Exception, context: Dict[str, Any] = None) -> None:
    """
    Log an error with optional context.

    Args:
        error: The exception to log
        context: Optional context dictionary
    """
    log_entry = {
        "timestamp": _timestamp(),
        "level": "ERROR",
        "error": str(error),
        "error_type": type(error).__name__,
    }

    if context:
        log_entry.update(context)

    logger.error(_to_json(log_entry))


def log_warning(message: str, context: Dict[str, Any] = None) -> None:
    """
    Log a warning with optional context.

    Args:
        message: The warning message
        context: Optional context dictionary
    """
    log_entry = {
        "timestamp": _timestamp(),
        "level": "WARNING",
        "message": message,
    }

    if context:
        log_entry.update(context)

    logger.warning(_to_json(log_entry))


def log_info(message: str, context: Dict[str, Any] = None) -> None:
    """
    Log an info message with optional context.

    Args:
        message: The info message
        context: Optional context dictionary
    """
    log_entry = {
        "timestamp": _timestamp(),
        "level": "INFO",
        "message": message,
    }

    if context:
        log_entry.update(context)

    logger.info(_to_json(log_entry))
