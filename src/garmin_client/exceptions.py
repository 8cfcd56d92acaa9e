"""Errors raised by the Garmin Connect metrics adapter."""

from __future__ import annotations


class GarminClientError(Exception):
    """Root of every garmin_client failure."""


class GarminAuthError(GarminClientError):
    """Login or token resume was rejected."""


class GarminMFARequired(GarminAuthError):
    """The account needs a verification code and no prompt was supplied."""


class GarminAPIError(GarminClientError):
    """A metrics or activities endpoint failed.

    ``endpoint`` names the feed that failed (``sleep``, ``activities``...)
    so callers can report partial pulls without parsing the message.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        endpoint: str | None = None,
    ) -> None:
        prefix = f"{endpoint}: " if endpoint else ""
        super().__init__(f"{prefix}{message}")
        self.status_code = status_code
        self.endpoint = endpoint


class GarminRateLimitError(GarminAPIError):
    """Still throttled (HTTP 429) after every retry."""

    def __init__(self, endpoint: str | None = None, attempts: int = 0) -> None:
        super().__init__(
            f"still rate limited after {attempts} attempts",
            status_code=429,
            endpoint=endpoint,
        )
        self.attempts = attempts
