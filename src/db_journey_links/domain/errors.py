"""Typed errors raised by the orchestration layer.

Each error carries the HTTP status code the web adapter answers with.
Decoder-level problems never surface as these errors; they degrade to
empty fields instead.
"""


class JourneyLinkError(Exception):
    """Base error for journey link resolution."""

    status_code: int = 500

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class MissingParameterError(JourneyLinkError):
    """A required input (request url or vbid) is absent."""

    status_code = 400

    def __init__(self, parameter: str, message: str | None = None) -> None:
        super().__init__(message or f"Missing required parameter: {parameter}")
        self.parameter = parameter


class UpstreamFetchError(JourneyLinkError):
    """The booking service was unreachable or answered with an invalid payload.

    Transient; callers may retry.
    """

    status_code = 502

    def __init__(
        self, message: str, cause: Exception | None = None, upstream_status: int | None = None
    ) -> None:
        super().__init__(message, cause)
        self.upstream_status = upstream_status


class ReconResolutionError(JourneyLinkError):
    """Every recon strategy failed to recover the station identifiers."""

    status_code = 422

    def __init__(self, message: str, failures: list[tuple[str, str]] | None = None) -> None:
        super().__init__(message)
        self.failures = failures or []


class IncompleteJourneyError(JourneyLinkError):
    """Extraction finished but a station identifier is missing."""

    status_code = 500
