"""Utilities for redacting sensitive information from logs and errors."""

import re
from typing import Any, Dict


def redact_token(text: str) -> str:
    """
    Redact GitLab tokens from text.

    Personal, project and group access tokens start with 'glpat-'; deploy,
    runner and OAuth tokens use other 'gl' prefixes such as 'gldt-' or 'gloas-'.
    """
    # Redact GitLab tokens
    text = re.sub(r'gl[a-z]{2,4}-[A-Za-z0-9_\-]{20,}', '***REDACTED***', text)

    # Redact PRIVATE-TOKEN headers
    text = re.sub(r'PRIVATE-TOKEN["\']?\s*[:=]\s*["\']?[A-Za-z0-9_\-\.]+', 'PRIVATE-TOKEN: ***REDACTED***', text, flags=re.IGNORECASE)

    # Redact Bearer tokens in Authorization headers
    text = re.sub(r'Bearer\s+[A-Za-z0-9_\-\.]+', 'Bearer ***REDACTED***', text)

    # Redact generic token patterns
    text = re.sub(r'(?<![-\w])token["\']?\s*[:=]\s*["\']?[A-Za-z0-9_\-\.]+', 'token: ***REDACTED***', text, flags=re.IGNORECASE)

    return text


def redact_dict(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively redact sensitive fields from a dictionary.

    Redacts common sensitive field names like 'token', 'password', 'secret', etc.
    """
    sensitive_keys = {'token', 'private-token', 'password', 'secret', 'api_key', 'apikey', 'authorization'}

    redacted = {}
    for key, value in data.items():
        if key.lower() in sensitive_keys:
            redacted[key] = '***REDACTED***'
        elif isinstance(value, dict):
            redacted[key] = redact_dict(value)
        elif isinstance(value, str):
            redacted[key] = redact_token(value)
        else:
            redacted[key] = value

    return redacted


def safe_error_message(error: Exception, context: str = "") -> str:
    """
    Create a safe error message with redacted sensitive information.

    Args:
        error: The exception to format
        context: Additional context about where the error occurred

    Returns:
        A safe error message with redacted tokens
    """
    error_msg = str(error)
    redacted_msg = redact_token(error_msg)

    if context:
        return f"{context}: {redacted_msg}"
    return redacted_msg
