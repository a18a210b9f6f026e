"""
Structured error types for jobspine.

Partition key derivation runs once while the job engine starts up, so every
error raised here is fatal to bring-up: nothing is retried and nothing is
partially applied. The hierarchy still carries a category and structured
context so that the startup failure can be logged and reported with the
offending type or setting attached.

Manifesto:
    - **Typed Error Hierarchy:** Configuration problems and classification
      problems are different failures with different fixes
    - **No Retry Semantics:** Derivation is pure computation over trusted
      input, a failure means the catalog or settings are wrong
    - **Rich Context:** Errors carry the type name / setting involved
    - **Error Chaining:** Preserve original exceptions as ``cause``

Architecture:
    ::

        ┌─────────────────────────────────────────────────────────────┐
        │                      JobSpineError                           │
        │            (category, context, cause)                        │
        ├─────────────────────────────────────────────────────────────┤
        │                                                              │
        │  ConfigError (CONFIG)             ClassificationError        │
        │       │                           (CLASSIFICATION)           │
        │  MissingConfigError                                          │
        │       └── MissingCatalogError                                │
        │  InvalidConfigError                                          │
        │       └── InvalidCatalogError                                │
        └─────────────────────────────────────────────────────────────┘

Examples:
    >>> error = MissingCatalogError()
    >>> error.category
    <ErrorCategory.CONFIG: 'CONFIG'>

    >>> error = ClassificationError("Ambiguous").with_context(type_name="Reminder")
    >>> error.context.type_name
    'Reminder'

Tags:
    error-handling, exception-hierarchy, error-context, jobspine

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories for classification and reporting.

    Attributes:
        CONFIG: Missing catalog, missing or invalid settings, broken catalog
        CLASSIFICATION: A record type cannot be put into exactly one category
        INTERNAL: Bugs, unexpected state
    """

    CONFIG = "CONFIG"
    CLASSIFICATION = "CLASSIFICATION"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata context for errors.

    Attributes:
        type_name: Record type being processed when the error occurred
        supertype: Supertype of that record type, if relevant
        setting: Configuration key involved
        metadata: Additional key-value pairs
    """

    type_name: str | None = None
    supertype: str | None = None
    setting: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["type_name", "supertype", "setting"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class JobSpineError(Exception):
    """
    Base exception for all jobspine errors.

    Every instance carries:
    - **category:** ErrorCategory for classification and reporting
    - **context:** ErrorContext with structured metadata
    - **cause:** Optional underlying exception for chaining

    Subclasses set ``default_category``. ``retryable`` is always ``False``:
    partition keys are derived once at startup and a failure there must abort
    the engine.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL
    retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> JobSpineError:
        """
        Add context to this error (fluent API).

        Usage:
            raise ClassificationError("Ambiguous").with_context(type_name="Reminder")
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
            "retryable": self.retryable,
        }
        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(JobSpineError):
    """
    Configuration error.

    The job engine cannot start until the configuration is fixed.
    """

    default_category = ErrorCategory.CONFIG


class MissingConfigError(ConfigError):
    """Required configuration is missing."""

    def __init__(self, key: str, message: str | None = None):
        self.key = key
        super().__init__(
            message or f"Missing required configuration: {key}",
            context=ErrorContext(setting=key),
        )


class MissingCatalogError(MissingConfigError):
    """No type catalog (metamodel source) was given."""

    def __init__(self, message: str | None = None):
        super().__init__("catalog", message or "No type catalog given!")


class InvalidConfigError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: Any, message: str | None = None):
        self.key = key
        self.value = value
        super().__init__(
            message or f"Invalid configuration for {key}: {value!r}",
            context=ErrorContext(setting=key),
        )


class InvalidCatalogError(InvalidConfigError):
    """The type catalog violates its structural invariants (duplicate names, cycles)."""

    def __init__(self, type_name: str, message: str):
        super().__init__("catalog", type_name, message)
        self.context.type_name = type_name


# =============================================================================
# CLASSIFICATION ERRORS
# =============================================================================


class ClassificationError(JobSpineError):
    """A record type matches both markers, or extends a concrete type of the other category."""

    default_category = ErrorCategory.CLASSIFICATION


__all__ = [
    "ErrorCategory",
    "ErrorContext",
    "JobSpineError",
    "ConfigError",
    "MissingConfigError",
    "MissingCatalogError",
    "InvalidConfigError",
    "InvalidCatalogError",
    "ClassificationError",
]
