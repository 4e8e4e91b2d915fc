"""Logging of outgoing booking service requests when DBJL_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

SENSITIVE_HEADERS = {"authorization", "cookie", "set-cookie", "x-api-key"}


def should_log_requests() -> bool:
    """Check if request logging is enabled via DBJL_LOG_REQUESTS environment variable."""
    return os.getenv("DBJL_LOG_REQUESTS", "").lower() == "true"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact session cookies and credentials."""
    return {k: "***REDACTED***" if k.lower() in SENSITIVE_HEADERS else v for k, v in headers.items()}


def _format_payload(payload: Any) -> str:
    try:
        return json.dumps(payload, indent=2) if isinstance(payload, dict) else str(payload)
    except (TypeError, ValueError):
        return str(payload)


def log_api_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    payload: Any = None,
    enabled: bool | None = None,
) -> None:
    """Log request details if enabled.

    Args:
        method: HTTP method.
        url: Request URL.
        headers: Request headers; cookies and credentials are redacted.
        payload: JSON body, if any.
        enabled: Overrides the DBJL_LOG_REQUESTS switch when not None.
    """
    if not (should_log_requests() if enabled is None else enabled):
        return

    log_parts = [f"{method} {url}"]

    if headers:
        log_parts.append(f"Headers: {json.dumps(_redact_sensitive_headers(headers), indent=2)}")

    if payload is not None:
        log_parts.append(f"Payload: {_format_payload(payload)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
