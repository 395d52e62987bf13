"""
Navigator Errors - Domain-specific error types.

Error hierarchy:
    NavigatorError (base)
    ├── ConfigError
    └── SpeechEngineError

Only ConfigError ever reaches the caller. The degraded conditions the
engine runs into (no voice for the locale, commands with nothing
scanned, activation without a container) are not exceptions at all:
they are logged and turn into silence or a no-op. Host failures are
absorbed at the call site; hosts raise SpeechEngineError so those call
sites have one type to report.
"""

from __future__ import annotations

from typing import Any


class NavigatorError(Exception):
    """Base error for all navigator-related errors."""
    
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(NavigatorError, ValueError):
    """Raised when a NavigatorConfig value is out of range."""
    
    def __init__(self, field_name: str, message: str):
        super().__init__(message, details={"field": field_name})
        self.field_name = field_name


class SpeechEngineError(NavigatorError):
    """
    Raised by speech hosts when enumeration, playback or cancellation fails.
    
    Never propagates out of the engine: the announcer and voice resolver
    catch it at the call site and log it.
    """
    
    def __init__(
        self,
        operation: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(f"{operation}: {message}", details)
        self.operation = operation
