# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error message sanitization utilities.

Slack incoming webhook URLs are bearer credentials: anyone holding the
URL can post to the channel. The helpers here keep the URL path out of
log records and stderr diagnostics.

Example:
    >>> redact_webhook_url("https://hooks.slack.com/services/T00/B00/XXX")
    'https://hooks.slack.com/[REDACTED]'
"""

from __future__ import annotations

from urllib.parse import urlsplit

_REDACTED: str = "[REDACTED]"


def redact_webhook_url(url: str | None) -> str:
    """Return the scheme and host of a webhook URL with the path masked.

    Args:
        url: Webhook URL, possibly empty or malformed

    Returns:
        ``"<scheme>://<host>/[REDACTED]"`` for a parseable URL, otherwise
        ``"[REDACTED]"``. An empty input returns an empty string.
    """
    if not url:
        return ""
    try:
        parts = urlsplit(url)
    except ValueError:
        return _REDACTED
    if not parts.scheme or not parts.hostname:
        return _REDACTED
    return f"{parts.scheme}://{parts.hostname}/{_REDACTED}"


def sanitize_error_message(
    exception: Exception,
    webhook_url: str | None = None,
    max_length: int = 500,
) -> str:
    """Sanitize an exception message for stderr and logs.

    Sanitization rules:
        1. Replace every occurrence of the webhook URL with its redacted form
        2. Truncate long messages
        3. Prefix with the exception type

    Args:
        exception: The exception to sanitize
        webhook_url: Webhook URL to scrub from the message
        max_length: Maximum length of the sanitized message (default 500)

    Returns:
        ``"{ExceptionType}: {sanitized_message}"``

    Example:
        >>> url = "https://hooks.slack.com/services/T00/B00/XXX"
        >>> msg = sanitize_error_message(ConnectionError(f"cannot reach {url}"), url)
        >>> "T00/B00" in msg
        False
    """
    exception_type = type(exception).__name__
    exception_str = str(exception)

    if webhook_url:
        exception_str = exception_str.replace(
            webhook_url, redact_webhook_url(webhook_url)
        )

    if len(exception_str) > max_length:
        exception_str = exception_str[:max_length] + "... [truncated]"

    return f"{exception_type}: {exception_str}"


__all__: list[str] = [
    "redact_webhook_url",
    "sanitize_error_message",
]
