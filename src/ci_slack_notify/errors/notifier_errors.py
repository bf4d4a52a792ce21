# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Notifier Error Classes.

Error Hierarchy:
    NotifierError (base, carries error_code, context and exit_code)
    ├── ConfigurationError    required environment variable missing (exit 1)
    └── DeliveryError         transport failure or HTTP status >= 299 (exit 2)
        └── SerializationError payload could not be encoded (exit 2)

All errors:
    - Use EnumNotifierErrorCode for classification
    - Support error chaining with `raise ... from e`
    - Accept ModelNotifierErrorContext for bundled context parameters
    - Expose the process exit status the CLI should use
"""

from typing import ClassVar, Optional

from ci_slack_notify.enums import EnumNotifierErrorCode
from ci_slack_notify.errors.model_notifier_error_context import (
    ModelNotifierErrorContext,
)


class NotifierError(Exception):
    """Base error class for notifier failures.

    Structured Fields (via ModelNotifierErrorContext):
        operation: Operation being performed
        target_name: Redacted endpoint name
        variable: Environment variable involved

    Example:
        >>> raise NotifierError(
        ...     "Notification failed",
        ...     context=ModelNotifierErrorContext(operation="post"),
        ...     attempt=1,
        ... )
    """

    exit_code: ClassVar[int] = 1

    def __init__(
        self,
        message: str,
        error_code: Optional[EnumNotifierErrorCode] = None,
        context: Optional[ModelNotifierErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize NotifierError with structured fields.

        Args:
            message: Human-readable error message
            error_code: Error code (defaults to NOTIFIER_ERROR)
            context: Bundled context (operation, target_name, variable)
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or EnumNotifierErrorCode.NOTIFIER_ERROR

        structured_context: dict[str, object] = dict(extra_context)
        if context is not None:
            structured_context.update(context.model_dump(exclude_none=True))
        self.context = structured_context

    def __str__(self) -> str:
        return self.message


class ConfigurationError(NotifierError):
    """Raised when a required environment variable is missing, empty or invalid.

    Example:
        >>> raise ConfigurationError(
        ...     "SLACK_WEBHOOK is required",
        ...     context=ModelNotifierErrorContext(
        ...         operation="validate_config", variable="SLACK_WEBHOOK"
        ...     ),
        ... )
    """

    exit_code: ClassVar[int] = 1

    def __init__(
        self,
        message: str,
        context: Optional[ModelNotifierErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            error_code=EnumNotifierErrorCode.CONFIGURATION_MISSING,
            context=context,
            **extra_context,
        )


class DeliveryError(NotifierError):
    """Raised when the webhook POST fails.

    Covers transport failures (DNS, connection refused, TLS) and HTTP
    responses with a status of 299 or above. For HTTP failures the
    response status code is available as ``status_code``.

    Example:
        >>> raise DeliveryError(
        ...     "Error on message: 404 Not Found",
        ...     context=ModelNotifierErrorContext(operation="post"),
        ...     status_code=404,
        ... )
    """

    exit_code: ClassVar[int] = 2

    def __init__(
        self,
        message: str,
        context: Optional[ModelNotifierErrorContext] = None,
        status_code: Optional[int] = None,
        error_code: Optional[EnumNotifierErrorCode] = None,
        **extra_context: object,
    ) -> None:
        """Initialize DeliveryError.

        Args:
            message: Human-readable error message
            context: Bundled context
            status_code: HTTP status code when the endpoint answered
            error_code: Override for subclasses (defaults to DELIVERY_FAILED)
            **extra_context: Additional context information
        """
        if status_code is not None:
            extra_context["status_code"] = status_code
        super().__init__(
            message=message,
            error_code=error_code or EnumNotifierErrorCode.DELIVERY_FAILED,
            context=context,
            **extra_context,
        )
        self.status_code = status_code


class SerializationError(DeliveryError):
    """Raised when the payload cannot be encoded as JSON.

    Not expected in normal operation since payloads are built from
    strings and booleans only.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelNotifierErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message=message,
            context=context,
            error_code=EnumNotifierErrorCode.SERIALIZATION_FAILED,
            **extra_context,
        )


__all__ = [
    "ConfigurationError",
    "DeliveryError",
    "NotifierError",
    "SerializationError",
]
